#!/usr/bin/env python3
"""
utils/config.py

Configuration management for the inventory run.

Two layers:
- ConfigManager: optional YAML settings (region default, logging, output path)
- InventoryConfig: the resolved, immutable configuration of one run
"""

import os
import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Mapping, Optional

from ec2_inventory.utils.exceptions import ConfigurationError
from ec2_inventory.utils.logger import setup_logger

DEFAULT_AWS_REGION = "us-east-1"
CONFIG_DIR_ENV_VAR = "EC2_INVENTORY_CONFIG_DIR"
ACCESS_KEY_ENV_VAR = "AWS_ACCESS_KEY_ID"
SECRET_KEY_ENV_VAR = "AWS_SECRET_ACCESS_KEY"


class ConfigManager:
    """
    Simple configuration manager.

    Features:
    - YAML configuration loading
    - Environment variable override support
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize ConfigManager.

        Args:
            config_dir: Custom config directory path (defaults to $EC2_INVENTORY_CONFIG_DIR,
                then ./configs)
        """
        self.config_dir = Path(
            config_dir or os.environ.get(CONFIG_DIR_ENV_VAR) or Path.cwd() / "configs"
        )
        self.logger = setup_logger(__name__, "config.log")

        # Try both .yml and .yaml extensions
        yml_file = self.config_dir / "settings.yml"
        yaml_file = self.config_dir / "settings.yaml"

        if yml_file.exists():
            self.settings_file = yml_file
        else:
            self.settings_file = yaml_file

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load a YAML file safely.
        """
        if not file_path.exists():
            self.logger.debug(f"Config file not found: {file_path}")
            return {}

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = yaml.safe_load(f)
                return content if isinstance(content, dict) else {}
        except (OSError, yaml.YAMLError) as e:
            self.logger.error(f"Error loading {file_path}: {e}")
            return {}

    def load_settings(self) -> Dict[str, Any]:
        """
        Load application settings.
        """
        return self._load_yaml_file(self.settings_file)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the full configuration as a cached property."""
        if not hasattr(self, "_cached_config"):
            self._cached_config = self.load_settings()
        return self._cached_config

    def get_value(
        self, key_path: str, default: Any = None, env_var: Optional[str] = None
    ) -> Any:
        """
        Get configuration value with dot notation support and environment variable override.
        """
        # Check environment variable first
        if env_var and env_var in os.environ:
            return os.environ[env_var]

        current = self.config
        try:
            for key in key_path.split("."):
                current = current[key]
            return current
        except (KeyError, TypeError):
            return default

    def get_aws_region(self) -> str:
        """Get default AWS region."""
        return self.get_value("aws.region", DEFAULT_AWS_REGION)

    def get_logging_level(self) -> str:
        """Get logging level."""
        return self.get_value("logging.level", "INFO", env_var="LOG_LEVEL")

    def get_logging_file_enabled(self) -> bool:
        """Whether log files are written under logs/."""
        return bool(self.get_value("logging.file", True))

    def get_report_path(self) -> str:
        """Get report output directory."""
        return self.get_value("report.path", ".")

    def get_max_workers(self) -> Optional[int]:
        """Get thread pool size for the collectors (None = one per collector)."""
        value = self.get_value("collector.max_workers")
        return int(value) if value else None


@dataclass(frozen=True)
class InventoryConfig:
    """Resolved configuration for one inventory run."""

    region: str
    access_key_id: str
    secret_access_key: str
    output_dir: str = "."
    max_workers: Optional[int] = None

    def __repr__(self) -> str:
        return (
            f"InventoryConfig(region={self.region!r}, access_key_id={self.access_key_id!r}, "
            f"secret_access_key='****', output_dir={self.output_dir!r}, "
            f"max_workers={self.max_workers!r})"
        )

    @classmethod
    def resolve(
        cls,
        region: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
        config_manager: Optional[ConfigManager] = None,
    ) -> "InventoryConfig":
        """Resolve region and credentials once, before any AWS call.

        Args:
            region: Region from the command line; falls back to the settings file,
                then to DEFAULT_AWS_REGION
            environ: Environment mapping to read credentials from (defaults to os.environ)
            config_manager: Settings source (defaults to a fresh ConfigManager)

        Raises:
            ConfigurationError: If either credential variable is missing or empty
        """
        environ = os.environ if environ is None else environ
        config_manager = config_manager or ConfigManager()

        access_key = environ.get(ACCESS_KEY_ENV_VAR)
        secret_key = environ.get(SECRET_KEY_ENV_VAR)
        missing = [
            name
            for name, value in ((ACCESS_KEY_ENV_VAR, access_key), (SECRET_KEY_ENV_VAR, secret_key))
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Set {ACCESS_KEY_ENV_VAR} and {SECRET_KEY_ENV_VAR} as environment variables "
                f"(missing: {', '.join(missing)}).",
                missing=missing,
            )

        return cls(
            region=region or config_manager.get_aws_region(),
            access_key_id=access_key,
            secret_access_key=secret_key,
            output_dir=config_manager.get_report_path(),
            max_workers=config_manager.get_max_workers(),
        )
