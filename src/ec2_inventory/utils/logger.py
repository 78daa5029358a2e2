# utils/logger.py
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

LOG_DIR = "logs"
LOG_ROTATION_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5

# Applied to loggers created after configure_logging() runs
_defaults = {"level": "INFO", "file_enabled": True}


def resolve_level(level: Union[str, int, None]) -> int:
    """Map a level name or number to a logging level, INFO when unknown."""
    if isinstance(level, int) and not isinstance(level, bool):
        return level
    if isinstance(level, str) and level.strip().isdigit():
        return int(level)
    value = logging.getLevelName(str(level or "").strip().upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Union[str, int, None] = None, file_enabled: Optional[bool] = None) -> None:
    """Set the level and file switch used by subsequent setup_logger calls."""
    if level:
        _defaults["level"] = level
    if file_enabled is not None:
        _defaults["file_enabled"] = file_enabled


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Union[str, int, None] = None,
    console: bool = True,
    max_bytes: int = LOG_ROTATION_MAX_BYTES,
    backup_count: int = LOG_BACKUP_COUNT,
) -> logging.Logger:
    """Setup logger with console output and an optional rotating log file"""
    logger = logging.getLogger(name)
    logger.setLevel(resolve_level(level or _defaults["level"]))

    # Prevent duplicate handlers
    if not logger.handlers:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

        # Console handler for immediate feedback
        if console:
            stream_handler = logging.StreamHandler(sys.stdout)
            stream_handler.setFormatter(formatter)
            stream_handler.setLevel(logging.INFO)
            logger.addHandler(stream_handler)

        if log_file and _defaults["file_enabled"]:
            logs_dir = Path(LOG_DIR)
            log_path = logs_dir / log_file

            try:
                logs_dir.mkdir(exist_ok=True)
                file_handler = logging.handlers.RotatingFileHandler(
                    log_path,
                    maxBytes=max_bytes,
                    backupCount=backup_count,
                    encoding="utf-8",
                )
                file_handler.setFormatter(formatter)
                file_handler.setLevel(logging.DEBUG)  # All levels to file
                logger.addHandler(file_handler)

            except OSError as e:
                logger.warning(
                    f"Failed to create log file {log_path}: {e}. Logging to console only."
                )

        # File-only loggers with file logging off stay silent
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())

        # Prevent propagation to root logger to avoid duplicate messages
        logger.propagate = False

    return logger
