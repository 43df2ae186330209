"""Binary image predicates and connectivity operations."""

from grayraster.binary.connectivity import (
    binary_background,
    binary_fill_holes,
    border_reachable,
)
from grayraster.binary.predicates import is_binary, threshold

__all__ = [
    "is_binary",
    "threshold",
    "border_reachable",
    "binary_background",
    "binary_fill_holes",
]
