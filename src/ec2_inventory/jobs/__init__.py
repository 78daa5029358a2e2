"""Inventory jobs package."""

from .base import BaseJob
from .collect_inventory import CollectInventoryJob

__all__ = [
    "BaseJob",
    "CollectInventoryJob",
]
