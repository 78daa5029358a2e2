"""Base job class for inventory operations."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import boto3
import uuid

from ec2_inventory.utils.config import ConfigManager, InventoryConfig
from ec2_inventory.utils.logger import setup_logger
from ec2_inventory.utils.session import SessionManager


class BaseJob(ABC):
    """Base class for jobs that run against one resolved InventoryConfig."""

    def __init__(
        self,
        config: InventoryConfig,
        config_manager: Optional[ConfigManager] = None,
        job_name: str = None,
    ):
        """Initialize the job with configuration."""
        self.config = config
        self.config_manager = config_manager or ConfigManager()
        self.job_name = job_name or self.__class__.__name__.lower().replace("job", "")
        self.correlation_id = str(uuid.uuid4())[:8]  # Short correlation ID for tracking

        self.logger = setup_logger(
            name=self.__class__.__module__,
            log_file=f"{self.job_name}.log",
        )

    def create_aws_session(self) -> boto3.Session:
        """Create the AWS session for this job's region and credentials."""
        self.logger.info(
            f"[{self.correlation_id}] Creating AWS session for {self.job_name} in {self.config.region}"
        )
        return SessionManager.get_session(self.config)

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the job with given parameters."""
        pass
