"""Shared utilities: configuration, sessions, logging, exceptions."""

from .config import ConfigManager, InventoryConfig, DEFAULT_AWS_REGION
from .exceptions import InventoryError, ConfigurationError
from .logger import setup_logger, configure_logging
from .session import SessionManager

__all__ = [
    "ConfigManager",
    "InventoryConfig",
    "DEFAULT_AWS_REGION",
    "InventoryError",
    "ConfigurationError",
    "setup_logger",
    "configure_logging",
    "SessionManager",
]
