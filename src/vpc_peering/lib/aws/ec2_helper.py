"""Helper functions for working with EC2 networking resources."""

import re
from functools import lru_cache

import boto3

# `a` for a regional zone, `-bos-1a` for a Local Zone
AVAILABILITY_ZONE_SUFFIX = re.compile(r"^(-[a-z]+-\d+)?[a-z]$")


@lru_cache
def aws_regions() -> list[str]:
    """Generate the list of regions where EC2 is offered.

    The list comes from the endpoint data bundled with botocore so that no
    credentials or API calls are required to validate a region name.

    :returns: List of AWS regions

    :rtype: List[str]
    """
    return boto3.session.Session().get_available_regions("ec2")


def zone_in_region(availability_zone: str, region: str) -> bool:
    """Determine whether an availability zone name belongs to the given region.

    Regional zones (`us-east-1a`) and Local Zones (`us-east-1-bos-1a`) are
    recognized. Wavelength Zones are not.

    :param availability_zone: The name of the zone, e.g. `us-east-1a`
    :type availability_zone: str

    :param region: The name of the region, e.g. `us-east-1`
    :type region: str

    :returns: True if the zone is a regional or Local Zone inside of the region

    :rtype: bool
    """
    if not availability_zone.startswith(region):
        return False
    return bool(AVAILABILITY_ZONE_SUFFIX.match(availability_zone[len(region) :]))
