"""Simple data models for EC2 inventory resources."""

# Compute
from .instance import (
    InstanceRecord,
    find_tag_value,
)

# Network
from .network import (
    NetworkRecord,
    SubnetRecord,
    InterfaceRecord,
)

# Storage
from .volume import (
    VolumeRecord,
)

# Snapshot
from .snapshot import (
    InventorySnapshot,
    utc_timestamp,
)

__all__ = [
    "InstanceRecord",
    "find_tag_value",
    "NetworkRecord",
    "SubnetRecord",
    "InterfaceRecord",
    "VolumeRecord",
    "InventorySnapshot",
    "utc_timestamp",
]
