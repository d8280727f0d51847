"""
Logging configuration for the SkillROI API.

Call setup_logging() once at startup; module code only ever does
logging.getLogger(__name__).
"""

import logging
import os
from pathlib import Path
from typing import Optional

# Standard log format with module name and line number
LOG_FORMAT = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "skillroi.log"

_LOGGING_CONFIGURED = False


def setup_logging(level: Optional[str] = None, log_dir: Optional[Path] = None) -> None:
    """
    Configure root logging.

    Args:
        level: Level name; defaults to $LOG_LEVEL or INFO.
        log_dir: If given (or $LOG_DIR is set), also write to <log_dir>/skillroi.log.
    """
    global _LOGGING_CONFIGURED

    if _LOGGING_CONFIGURED:
        return

    level_name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_level = getattr(logging, level_name, logging.INFO)

    if log_dir is None and os.getenv("LOG_DIR"):
        log_dir = Path(os.environ["LOG_DIR"])

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    root = logging.getLogger()
    root.setLevel(log_level)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _LOGGING_CONFIGURED = True
    logging.getLogger(__name__).debug("Logging configured at %s", level_name)
