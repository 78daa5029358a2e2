"""Network data models: VPCs, subnets and network interfaces."""

from dataclasses import dataclass
from typing import Dict, Optional, Any


@dataclass
class NetworkRecord:
    """VPC record."""
    vpc_id: str
    cidr_block: Optional[str]
    is_default: Optional[bool]

    @classmethod
    def from_aws_vpc(cls, vpc: Dict[str, Any]) -> "NetworkRecord":
        return cls(
            vpc_id=vpc.get("VpcId"),
            cidr_block=vpc.get("CidrBlock"),
            is_default=vpc.get("IsDefault"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "VpcId": self.vpc_id,
            "CidrBlock": self.cidr_block,
            "IsDefault": self.is_default,
        }


@dataclass
class SubnetRecord:
    """Subnet record."""
    subnet_id: str
    vpc_id: Optional[str]
    cidr_block: Optional[str]
    availability_zone: Optional[str]

    @classmethod
    def from_aws_subnet(cls, subnet: Dict[str, Any]) -> "SubnetRecord":
        return cls(
            subnet_id=subnet.get("SubnetId"),
            vpc_id=subnet.get("VpcId"),
            cidr_block=subnet.get("CidrBlock"),
            availability_zone=subnet.get("AvailabilityZone"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "SubnetId": self.subnet_id,
            "VpcId": self.vpc_id,
            "CidrBlock": self.cidr_block,
            "AZ": self.availability_zone,
        }


@dataclass
class InterfaceRecord:
    """Elastic network interface record."""
    network_interface_id: str
    private_ip: Optional[str]
    subnet_id: Optional[str]
    vpc_id: Optional[str]
    status: Optional[str]
    attached_instance: Optional[str] = None

    @classmethod
    def from_aws_interface(cls, eni: Dict[str, Any]) -> "InterfaceRecord":
        """Create InterfaceRecord from AWS network interface data.

        Interfaces attached to non-instance owners (NAT gateways, load
        balancers) carry an Attachment without InstanceId and map to None.
        """
        return cls(
            network_interface_id=eni.get("NetworkInterfaceId"),
            private_ip=eni.get("PrivateIpAddress"),
            subnet_id=eni.get("SubnetId"),
            vpc_id=eni.get("VpcId"),
            status=eni.get("Status"),
            attached_instance=(eni.get("Attachment") or {}).get("InstanceId") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "NetworkInterfaceId": self.network_interface_id,
            "PrivateIp": self.private_ip,
            "SubnetId": self.subnet_id,
            "VpcId": self.vpc_id,
            "Status": self.status,
            "AttachedInstance": self.attached_instance,
        }
