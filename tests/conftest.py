"""Shared pytest fixtures for the VPC peering infrastructure tests."""

import pytest


@pytest.fixture
def aws_region():
    """Return default AWS region for tests.

    Returns:
        str: AWS region identifier.
    """
    return "us-east-1"


@pytest.fixture
def mock_tags():
    """Return standard tags for test resources.

    Returns:
        dict: Dictionary of common resource tags.
    """
    return {
        "Environment": "dev",
        "Project": "vpc-peering",
        "Owner": "platform-engineering",
    }


@pytest.fixture
def requester_vpc_args(mock_tags, aws_region):
    """Keyword arguments describing Network A."""
    return {
        "vpc_name": "vpc-a",
        "cidr_block": "10.0.0.0/16",
        "subnet_cidr_block": "10.0.1.0/24",
        "availability_zone": f"{aws_region}a",
        "region": aws_region,
        "tags": dict(mock_tags),
    }


@pytest.fixture
def accepter_vpc_args(mock_tags, aws_region):
    """Keyword arguments describing Network B."""
    return {
        "vpc_name": "vpc-b",
        "cidr_block": "10.1.0.0/16",
        "subnet_cidr_block": "10.1.1.0/24",
        "availability_zone": f"{aws_region}b",
        "region": aws_region,
        "tags": dict(mock_tags),
    }
