#!/usr/bin/env python3
"""
utils/session.py

Session management utilities for AWS interactions.

The session is built only from an already resolved InventoryConfig, so the
environment is read in exactly one place (InventoryConfig.resolve).
"""

import boto3

from .config import InventoryConfig
from .logger import setup_logger


class SessionManager:
    """Manages AWS sessions for the inventory run."""

    @classmethod
    def get_session(cls, config: InventoryConfig) -> boto3.Session:
        """Create a boto3 Session bound to the configured region and key pair."""
        logger = setup_logger(__name__, "session.log")
        logger.debug(
            f"Creating AWS session in {config.region} for access key {config.access_key_id[:4]}****"
        )
        return boto3.Session(
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
            region_name=config.region,
        )
