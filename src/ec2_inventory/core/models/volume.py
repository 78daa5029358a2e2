"""EBS volume record."""

from dataclasses import dataclass
from typing import Dict, Optional, Any


@dataclass
class VolumeRecord:
    """Simple EBS volume information model."""
    volume_id: str
    size_gib: Optional[int]
    state: Optional[str]
    volume_type: Optional[str]
    availability_zone: Optional[str]
    attached_instance: Optional[str] = None

    @classmethod
    def from_aws_volume(cls, volume: Dict[str, Any]) -> "VolumeRecord":
        """Create VolumeRecord from AWS volume data.

        Only the first attachment is kept; multi-attach volumes lose the rest.
        """
        attachments = volume.get("Attachments") or []
        attached_instance = attachments[0].get("InstanceId") if attachments else None
        return cls(
            volume_id=volume.get("VolumeId"),
            size_gib=volume.get("Size"),
            state=volume.get("State"),
            volume_type=volume.get("VolumeType"),
            availability_zone=volume.get("AvailabilityZone"),
            attached_instance=attached_instance or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "VolumeId": self.volume_id,
            "SizeGiB": self.size_gib,
            "State": self.state,
            "Type": self.volume_type,
            "AZ": self.availability_zone,
            "AttachedInstance": self.attached_instance,
        }
