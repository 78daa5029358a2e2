"""Inventory snapshot model."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Any

from ec2_inventory.core.constants import SNAPSHOT_KEYS


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T10:00:00.000Z."""
    moment = moment or datetime.now(timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class InventorySnapshot:
    """Consolidated inventory of one region at one point in time."""
    region: str
    timestamp: str
    instances: List[Dict[str, Any]] = field(default_factory=list)
    vpcs: List[Dict[str, Any]] = field(default_factory=list)
    subnets: List[Dict[str, Any]] = field(default_factory=list)
    network_interfaces: List[Dict[str, Any]] = field(default_factory=list)
    volumes: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def resource_counts(self) -> Dict[str, int]:
        data = self.to_dict()
        return {key: len(data[key]) for key in SNAPSHOT_KEYS}

    @classmethod
    def from_collections(
        cls, region: str, collections: Dict[str, List[Dict[str, Any]]], timestamp: Optional[str] = None
    ) -> "InventorySnapshot":
        """Build a snapshot from collector results keyed by snapshot key."""
        return cls(
            region=region,
            timestamp=timestamp or utc_timestamp(),
            instances=list(collections.get("instances") or []),
            vpcs=list(collections.get("vpcs") or []),
            subnets=list(collections.get("subnets") or []),
            network_interfaces=list(collections.get("networkInterfaces") or []),
            volumes=list(collections.get("volumes") or []),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the output document layout."""
        return {
            "region": self.region,
            "timestamp": self.timestamp,
            "instances": self.instances,
            "vpcs": self.vpcs,
            "subnets": self.subnets,
            "networkInterfaces": self.network_interfaces,
            "volumes": self.volumes,
        }
