"""Record mapping tests."""

from datetime import datetime, timezone

from ec2_inventory.core.models import (
    InstanceRecord,
    NetworkRecord,
    SubnetRecord,
    InterfaceRecord,
    VolumeRecord,
    InventorySnapshot,
    utc_timestamp,
)


class TestInstanceRecord:
    def test_name_from_first_matching_tag(self):
        record = InstanceRecord.from_aws_instance(
            {
                "InstanceId": "i-1",
                "Tags": [
                    {"Key": "Team", "Value": "x"},
                    {"Key": "Name", "Value": "web-1"},
                    {"Key": "Name", "Value": "web-2"},
                ],
            }
        )
        assert record.name == "web-1"

    def test_name_is_none_without_name_tag(self):
        assert InstanceRecord.from_aws_instance(
            {"InstanceId": "i-1", "Tags": [{"Key": "Team", "Value": "x"}]}
        ).name is None
        assert InstanceRecord.from_aws_instance({"InstanceId": "i-1"}).name is None

    def test_stopped_instance_without_public_ip(self):
        record = InstanceRecord.from_aws_instance(
            {
                "InstanceId": "i-0abc",
                "InstanceType": "t3.small",
                "State": {"Code": 80, "Name": "stopped"},
                "PrivateIpAddress": "172.31.0.5",
                "Placement": {"AvailabilityZone": "eu-west-1b"},
            }
        )
        assert record.to_dict() == {
            "InstanceId": "i-0abc",
            "InstanceType": "t3.small",
            "State": "stopped",
            "Name": None,
            "PrivateIp": "172.31.0.5",
            "PublicIp": None,
            "AZ": "eu-west-1b",
        }

    def test_empty_public_ip_is_none(self):
        record = InstanceRecord.from_aws_instance({"InstanceId": "i-1", "PublicIpAddress": ""})
        assert record.public_ip is None


class TestNetworkRecords:
    def test_vpc(self):
        vpc = NetworkRecord.from_aws_vpc(
            {"VpcId": "vpc-default", "CidrBlock": "172.31.0.0/16", "IsDefault": True, "State": "available"}
        )
        assert vpc.to_dict() == {"VpcId": "vpc-default", "CidrBlock": "172.31.0.0/16", "IsDefault": True}

    def test_subnet(self):
        subnet = SubnetRecord.from_aws_subnet(
            {"SubnetId": "subnet-1", "VpcId": "vpc-1", "CidrBlock": "10.0.0.0/24", "AvailabilityZone": "us-east-1a"}
        )
        assert subnet.to_dict() == {
            "SubnetId": "subnet-1",
            "VpcId": "vpc-1",
            "CidrBlock": "10.0.0.0/24",
            "AZ": "us-east-1a",
        }

    def test_unattached_interface(self):
        eni = InterfaceRecord.from_aws_interface(
            {"NetworkInterfaceId": "eni-1", "Status": "available", "SubnetId": "subnet-1", "VpcId": "vpc-1"}
        )
        data = eni.to_dict()
        assert data["AttachedInstance"] is None
        assert "AttachedInstance" in data

    def test_interface_attached_to_non_instance(self):
        eni = InterfaceRecord.from_aws_interface(
            {"NetworkInterfaceId": "eni-nat", "Status": "in-use", "Attachment": {"AttachmentId": "ela-attach-1"}}
        )
        assert eni.attached_instance is None

    def test_interface_attached_to_instance(self):
        eni = InterfaceRecord.from_aws_interface(
            {"NetworkInterfaceId": "eni-1", "Attachment": {"InstanceId": "i-123"}}
        )
        assert eni.attached_instance == "i-123"


class TestVolumeRecord:
    def test_empty_attachments(self):
        volume = VolumeRecord.from_aws_volume({"VolumeId": "vol-1", "Size": 8, "Attachments": []})
        assert volume.to_dict()["AttachedInstance"] is None

    def test_first_attachment_wins(self):
        volume = VolumeRecord.from_aws_volume(
            {
                "VolumeId": "vol-1",
                "Size": 100,
                "State": "in-use",
                "VolumeType": "io2",
                "AvailabilityZone": "us-east-1a",
                "Attachments": [{"InstanceId": "i-123"}, {"InstanceId": "i-456"}],
            }
        )
        assert volume.to_dict() == {
            "VolumeId": "vol-1",
            "SizeGiB": 100,
            "State": "in-use",
            "Type": "io2",
            "AZ": "us-east-1a",
            "AttachedInstance": "i-123",
        }


class TestInventorySnapshot:
    def test_missing_collections_become_empty_lists(self):
        snapshot = InventorySnapshot.from_collections("us-east-1", {}, timestamp="2024-01-01T00:00:00.000Z")
        assert snapshot.to_dict() == {
            "region": "us-east-1",
            "timestamp": "2024-01-01T00:00:00.000Z",
            "instances": [],
            "vpcs": [],
            "subnets": [],
            "networkInterfaces": [],
            "volumes": [],
        }

    def test_resource_counts(self):
        snapshot = InventorySnapshot.from_collections(
            "us-east-1", {"vpcs": [{"VpcId": "vpc-1"}], "volumes": [{}, {}]}, timestamp="t"
        )
        assert snapshot.resource_counts == {
            "instances": 0,
            "vpcs": 1,
            "subnets": 0,
            "networkInterfaces": 0,
            "volumes": 2,
        }

    def test_utc_timestamp_format(self):
        moment = datetime(2024, 5, 1, 10, 30, 15, 123456, tzinfo=timezone.utc)
        assert utc_timestamp(moment) == "2024-05-01T10:30:15.123Z"
