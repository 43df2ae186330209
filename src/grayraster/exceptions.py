"""Exception types raised by grayraster."""


class PGMError(Exception):
    """Raised when a PGM file cannot be read or written."""


class NotBinaryImageError(ValueError):
    """Raised when a binary-only operation receives a non-binary image."""
