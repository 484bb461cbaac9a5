# ruff: noqa: E501

"""This module defines a Pulumi component resource for a single-subnet AWS VPC.

This includes:

- Create the named VPC with DNS support and appropriate tags
- Create one subnet in a single availability zone
- Create a route table for the VPC
- Associate the subnet with the route table

Routes are not created here. They are injected into the route table by
whatever connects this network to another one, e.g. a VPC peering connection.
"""

from ipaddress import IPv4Network

import pulumi
from pulumi import ComponentResource, ResourceOptions
from pulumi_aws import ec2
from pydantic import ValidationInfo, field_validator

from vpc_peering.lib.aws.ec2_helper import zone_in_region
from vpc_peering.lib.types import AWSBase

MIN_NET_PREFIX = 16  # AWS does not allow a VPC larger than a /16
MAX_NET_PREFIX = 28  # AWS does not allow a VPC or subnet smaller than a /28


class SimpleVPCConfig(AWSBase):
    """Schema definition for VPC configuration values."""

    vpc_name: str
    cidr_block: IPv4Network
    subnet_cidr_block: IPv4Network
    availability_zone: str
    enable_dns_support: bool = True
    enable_dns_hostnames: bool = True
    map_public_ip_on_launch: bool = True

    @field_validator("cidr_block")
    @classmethod
    def is_private_net(cls, network: IPv4Network) -> IPv4Network:
        """Ensure that only private networks are assigned to the VPC.

        :param network: CIDR block configured for the VPC to be created
        :type network: IPv4Network

        :raises ValueError: Raise a ValueError if the CIDR block is not for an RFC1918
            private network, or is outside of the sizes that AWS allows

        :returns: IPv4Network object passed to validator function

        :rtype: IPv4Network
        """
        if not network.is_private:
            msg = "Specified CIDR block for VPC is not an RFC1918 private network"
            raise ValueError(msg)
        if not MIN_NET_PREFIX <= network.prefixlen <= MAX_NET_PREFIX:
            msg = f"Specified CIDR block has an invalid prefix length. Please specify a network with a prefix length between /{MIN_NET_PREFIX} and /{MAX_NET_PREFIX}"
            raise ValueError(msg)
        return network

    @field_validator("subnet_cidr_block")
    @classmethod
    def subnet_is_in_vpc(
        cls, subnet: IPv4Network, info: ValidationInfo
    ) -> IPv4Network:
        """Ensure that the subnet falls inside of the VPC's address space.

        :param subnet: The CIDR block of the subnet to be created in the VPC.
        :type subnet: IPv4Network
        :param info: Dictonary containing the rest of the class values
        :type info: ValidationInfo
        :raises ValueError: Raise a ValueError if the subnet is not contained in
            the VPC cidr
        :returns: The subnet CIDR block
        :rtype: IPv4Network
        """
        network = info.data.get("cidr_block")
        if network is None:
            # The VPC CIDR already failed validation and has been reported
            return subnet
        if not subnet.subnet_of(network):
            msg = f"{subnet} is not a subnet of {network}"
            raise ValueError(msg)
        if subnet.prefixlen > MAX_NET_PREFIX:
            msg = f"Subnet {subnet} is smaller than the minimum size of /{MAX_NET_PREFIX}"
            raise ValueError(msg)
        return subnet

    @field_validator("availability_zone")
    @classmethod
    def zone_matches_region(cls, zone: str, info: ValidationInfo) -> str:
        region = info.data.get("region")
        if region is not None and not zone_in_region(zone, region):
            msg = f"Availability zone {zone} is not in region {region}"
            raise ValueError(msg)
        return zone


class SimpleVPC(ComponentResource):
    """Pulumi component for building an AWS VPC with a single routed subnet."""

    def __init__(
        self, vpc_config: SimpleVPCConfig, opts: ResourceOptions | None = None
    ):
        """Build an AWS VPC with one subnet and a route table governing it.

        :param vpc_config: Configuration object for customizing the created VPC and
            associated resources.
        :type vpc_config: SimpleVPCConfig

        :param opts: Optional resource options to be merged into the defaults.  Useful
            for handling things like AWS provider overrides.
        :type opts: Optional[ResourceOptions]
        """
        super().__init__("vpc_peering:aws:SimpleVPC", vpc_config.vpc_name, None, opts)
        resource_options = ResourceOptions.merge(
            ResourceOptions(parent=self),
            opts,
        )
        self.vpc_config = vpc_config
        pulumi.log.debug(
            f"Declaring VPC {vpc_config.vpc_name} with CIDR {vpc_config.cidr_block}"
        )
        self.vpc = ec2.Vpc(
            vpc_config.vpc_name,
            cidr_block=str(vpc_config.cidr_block),
            enable_dns_support=vpc_config.enable_dns_support,
            enable_dns_hostnames=vpc_config.enable_dns_hostnames,
            tags=vpc_config.merged_tags({"Name": vpc_config.vpc_name}),
            opts=resource_options,
        )

        subnet_name = f"{vpc_config.vpc_name}-subnet"
        self.subnet = ec2.Subnet(
            subnet_name,
            vpc_id=self.vpc.id,
            cidr_block=str(vpc_config.subnet_cidr_block),
            availability_zone=vpc_config.availability_zone,
            map_public_ip_on_launch=vpc_config.map_public_ip_on_launch,
            tags=vpc_config.merged_tags({"Name": subnet_name}),
            opts=resource_options,
        )

        self.route_table = ec2.RouteTable(
            f"{vpc_config.vpc_name}-route-table",
            vpc_id=self.vpc.id,
            tags=vpc_config.merged_tags(
                {"Name": f"{vpc_config.vpc_name}-route-table"}
            ),
            opts=resource_options,
        )

        self.route_table_association = ec2.RouteTableAssociation(
            f"{subnet_name}-route-table-association",
            subnet_id=self.subnet.id,
            route_table_id=self.route_table.id,
            opts=resource_options,
        )

        self.register_outputs(
            {
                "vpc": self.vpc,
                "subnet": self.subnet,
                "route_table": self.route_table,
            }
        )
