"""Core EC2 inventory module."""

from .aws import EC2Manager, create_ec2_manager
from .models import (
    InstanceRecord,
    NetworkRecord,
    SubnetRecord,
    InterfaceRecord,
    VolumeRecord,
    InventorySnapshot,
)
from .processors import COLLECTORS, InventoryAggregator, ResourceCollector, JSONReportGenerator

__all__ = [
    # AWS Managers
    "EC2Manager",
    "create_ec2_manager",
    # Models
    "InstanceRecord",
    "NetworkRecord",
    "SubnetRecord",
    "InterfaceRecord",
    "VolumeRecord",
    "InventorySnapshot",
    # Processors
    "COLLECTORS",
    "InventoryAggregator",
    "ResourceCollector",
    "JSONReportGenerator",
]
