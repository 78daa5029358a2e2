"""EC2 Manager for the inventory describe calls."""

from typing import Dict, List, Any
import boto3

from ec2_inventory.utils.logger import setup_logger


class EC2Manager:
    """Read-only EC2 client bound to one region.

    Each describe method issues a single unfiltered request and returns the
    raw items of that response. Only the first page is read; a NextToken in
    the response is logged as a truncation warning and not followed.
    Provider errors propagate to the caller unchanged.
    """

    def __init__(self, session: boto3.Session, region: str):
        """Initialize EC2Manager."""
        self.session = session
        self.region = region
        self.ec2_client = session.client("ec2", region_name=region)
        self.logger = setup_logger(__name__, "ec2_manager.log")

    def _first_page(self, operation: str, result_key: str) -> List[Dict[str, Any]]:
        response = getattr(self.ec2_client, operation)()
        if response.get("NextToken"):
            self.logger.warning(
                f"{operation} in {self.region} returned more than one page; "
                f"only the first {len(response.get(result_key) or [])} {result_key} are included"
            )
        return response.get(result_key) or []

    def describe_instances(self) -> List[Dict[str, Any]]:
        """Describe EC2 instances, flattened across reservations in response order."""
        instances = []
        for reservation in self._first_page("describe_instances", "Reservations"):
            instances.extend(reservation.get("Instances") or [])
        return instances

    def describe_vpcs(self) -> List[Dict[str, Any]]:
        """Describe VPCs."""
        return self._first_page("describe_vpcs", "Vpcs")

    def describe_subnets(self) -> List[Dict[str, Any]]:
        """Describe subnets."""
        return self._first_page("describe_subnets", "Subnets")

    def describe_network_interfaces(self) -> List[Dict[str, Any]]:
        """Describe elastic network interfaces."""
        return self._first_page("describe_network_interfaces", "NetworkInterfaces")

    def describe_volumes(self) -> List[Dict[str, Any]]:
        """Describe EBS volumes."""
        return self._first_page("describe_volumes", "Volumes")


def create_ec2_manager(session: boto3.Session, region: str) -> EC2Manager:
    """Create EC2Manager instance."""
    return EC2Manager(session, region)
