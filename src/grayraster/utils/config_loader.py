"""YAML configuration loading.

Configs are plain nested dictionaries read with ``config.get(key, default)``.
"""

import copy
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "threshold": 128,
    "connectivity": {
        "method": "worklist",
    },
    "logging": {
        "level": "INFO",
        "log_dir": None,
    },
}


def merge_config(defaults: dict, overrides: Optional[dict]) -> dict:
    """Recursively merge overrides into a copy of defaults."""
    merged = copy.deepcopy(defaults)
    if not overrides:
        return merged
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(config_path: Union[str, Path]) -> dict:
    """Load a YAML config file.

    Args:
        config_path: Path to the YAML file

    Returns:
        Config dictionary ({} for an empty file)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the top level of the file is not a mapping
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")
    return config
