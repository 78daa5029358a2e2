"""EC2 instance record."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Any

from ec2_inventory.core.constants import NAME_TAG_KEY


def find_tag_value(tags: Optional[List[Dict[str, str]]], key: str) -> Optional[str]:
    """Return the value of the first tag with the given key, or None."""
    for tag in tags or []:
        if tag.get("Key") == key:
            return tag.get("Value") or None
    return None


@dataclass
class InstanceRecord:
    """Flattened view of one EC2 instance."""
    instance_id: str
    instance_type: Optional[str]
    state: Optional[str]
    name: Optional[str] = None
    private_ip: Optional[str] = None
    public_ip: Optional[str] = None
    availability_zone: Optional[str] = None

    @classmethod
    def from_aws_instance(cls, instance: Dict[str, Any]) -> "InstanceRecord":
        """Create InstanceRecord from AWS instance data."""
        return cls(
            instance_id=instance.get("InstanceId"),
            instance_type=instance.get("InstanceType"),
            state=(instance.get("State") or {}).get("Name"),
            name=find_tag_value(instance.get("Tags"), NAME_TAG_KEY),
            private_ip=instance.get("PrivateIpAddress"),
            public_ip=instance.get("PublicIpAddress") or None,
            availability_zone=(instance.get("Placement") or {}).get("AvailabilityZone"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "InstanceId": self.instance_id,
            "InstanceType": self.instance_type,
            "State": self.state,
            "Name": self.name,
            "PrivateIp": self.private_ip,
            "PublicIp": self.public_ip,
            "AZ": self.availability_zone,
        }
