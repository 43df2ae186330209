"""Logging configuration for the project.

This module sets up consistent logging across all modules.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FILE_NAME = "grayraster.log"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_dir: Optional[Union[str, Path]] = None,
    log_level: Union[int, str] = logging.INFO,
) -> None:
    """Configure logging for the project.

    Args:
        log_dir: Optional directory to save log files
        log_level: Logging level, as a number or a name such as "DEBUG"
    """
    if isinstance(log_level, str):
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")
        log_level = level

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / LOG_FILE_NAME))

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
