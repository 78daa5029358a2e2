"""
tests/conftest.py - shared pytest fixtures

Canned EC2 describe responses and a MagicMock-backed EC2Manager.

Usage:
    def test_something(mock_ec2_client, ec2_manager):
        mock_ec2_client.describe_volumes.return_value = {"Volumes": [...]}
        ...
"""

import logging
from unittest.mock import MagicMock

import pytest

from ec2_inventory.core.aws.ec2 import EC2Manager
from ec2_inventory.utils.config import InventoryConfig
from ec2_inventory.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def setup_test_environment(tmp_path, monkeypatch):
    """Run each test in an empty directory with fake credentials and no log files."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.delenv("AWS_SESSION_TOKEN", raising=False)
    monkeypatch.delenv("EC2_INVENTORY_CONFIG_DIR", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    configure_logging(level="INFO", file_enabled=False)

    yield

    # Drop handlers so the next test binds to its own stdout
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("ec2_inventory"):
            logger = logging.getLogger(name)
            for handler in list(logger.handlers):
                logger.removeHandler(handler)
                handler.close()


@pytest.fixture
def inventory_config(tmp_path):
    return InventoryConfig(
        region="eu-west-1",
        access_key_id="AKIATESTING",
        secret_access_key="secret-testing",
        output_dir=str(tmp_path),
    )


@pytest.fixture
def mock_ec2_client():
    """EC2 client with one resource of each kind."""
    mock_client = MagicMock()

    mock_client.describe_instances.return_value = {
        "Reservations": [
            {
                "Instances": [
                    {
                        "InstanceId": "i-1234567890abcdef0",
                        "InstanceType": "t3.micro",
                        "State": {"Name": "running"},
                        "Tags": [
                            {"Key": "Team", "Value": "x"},
                            {"Key": "Name", "Value": "web-1"},
                        ],
                        "PrivateIpAddress": "10.0.1.10",
                        "PublicIpAddress": "54.1.2.3",
                        "Placement": {"AvailabilityZone": "eu-west-1a"},
                    }
                ]
            }
        ]
    }
    mock_client.describe_vpcs.return_value = {
        "Vpcs": [{"VpcId": "vpc-12345678", "CidrBlock": "10.0.0.0/16", "IsDefault": False}]
    }
    mock_client.describe_subnets.return_value = {
        "Subnets": [
            {
                "SubnetId": "subnet-12345678",
                "VpcId": "vpc-12345678",
                "CidrBlock": "10.0.1.0/24",
                "AvailabilityZone": "eu-west-1a",
            }
        ]
    }
    mock_client.describe_network_interfaces.return_value = {
        "NetworkInterfaces": [
            {
                "NetworkInterfaceId": "eni-12345678",
                "PrivateIpAddress": "10.0.1.10",
                "SubnetId": "subnet-12345678",
                "VpcId": "vpc-12345678",
                "Status": "in-use",
                "Attachment": {"InstanceId": "i-1234567890abcdef0"},
            }
        ]
    }
    mock_client.describe_volumes.return_value = {
        "Volumes": [
            {
                "VolumeId": "vol-12345678",
                "Size": 8,
                "State": "in-use",
                "VolumeType": "gp3",
                "AvailabilityZone": "eu-west-1a",
                "Attachments": [{"InstanceId": "i-1234567890abcdef0"}],
            }
        ]
    }
    return mock_client


@pytest.fixture
def mock_boto3_session(mock_ec2_client):
    mock_session = MagicMock()
    mock_session.client.return_value = mock_ec2_client
    return mock_session


@pytest.fixture
def ec2_manager(mock_boto3_session):
    return EC2Manager(mock_boto3_session, "eu-west-1")
