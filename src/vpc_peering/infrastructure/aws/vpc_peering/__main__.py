"""Manage two VPCs and the peering connection that joins them.

Each VPC gets a single subnet that is associated with the VPC's route table.
The peering connection is auto-accepted, so both VPCs must live in the same
account and region, and a route for the peer's CIDR block is added to each
route table.
"""

from typing import Any

from pulumi import Config, export, log

from vpc_peering.components.aws.network import SimpleVPC, SimpleVPCConfig
from vpc_peering.components.aws.peering import PeeredVPCsConfig, VPCPeeringConnection
from vpc_peering.lib.pulumi_helper import parse_stack


def vpc_exports(vpc: SimpleVPC, peers: list[str] | None = None) -> dict[str, Any]:
    """Create a consistent structure for VPC stack exports.

    :param vpc: The VPC whose data you would like to export
    :type vpc: SimpleVPC

    :param peers: A list of the VPC peers that connect to this network.
    :type peers: Optional[List[str]]

    :returns: A dictionary of data to be exported

    :rtype: Dict[str, Any]
    """
    return {
        "cidr": vpc.vpc.cidr_block,
        "id": vpc.vpc.id,
        "name": vpc.vpc_config.vpc_name,
        "peers": peers or [],
        "region": vpc.vpc_config.region,
        "subnet_id": vpc.subnet.id,
        "subnet_cidr": vpc.subnet.cidr_block,
        "subnet_zone": vpc.subnet.availability_zone,
        "route_table_id": vpc.route_table.id,
    }


def network_config(
    config_namespace: str, region: str, tags: dict[str, str]
) -> SimpleVPCConfig:
    vpc_config = Config(config_namespace)
    return SimpleVPCConfig(
        vpc_name=vpc_config.require("name"),
        cidr_block=vpc_config.require("cidr_block"),
        subnet_cidr_block=vpc_config.require("subnet_cidr_block"),
        availability_zone=vpc_config.require("availability_zone"),
        enable_dns_support=vpc_config.get_bool("enable_dns_support") is not False,
        enable_dns_hostnames=vpc_config.get_bool("enable_dns_hostnames") is not False,
        map_public_ip_on_launch=vpc_config.get_bool("map_public_ip_on_launch")
        is not False,
        region=region,
        tags=tags,
    )


stack_info = parse_stack()
aws_config = Config("aws")
peering_config = Config("vpc_peering")
region = aws_config.require("region")

base_tags = {
    "Environment": stack_info.environment,
    "Project": stack_info.project,
}

peered_vpcs_config = PeeredVPCsConfig(
    peering_name=peering_config.get("name") or stack_info.resource_prefix,
    requester=network_config("requester_vpc", region, dict(base_tags)),
    accepter=network_config("accepter_vpc", region, dict(base_tags)),
    auto_accept=peering_config.get_bool("auto_accept") is not False,
)
log.info(
    f"{stack_info.full_name}: peering {peered_vpcs_config.requester.vpc_name} ({peered_vpcs_config.requester.cidr_block}) "
    f"with {peered_vpcs_config.accepter.vpc_name} ({peered_vpcs_config.accepter.cidr_block})"
)

requester_vpc = SimpleVPC(peered_vpcs_config.requester)
accepter_vpc = SimpleVPC(peered_vpcs_config.accepter)
vpc_peer = VPCPeeringConnection(
    peered_vpcs_config.peering_name,
    requester_vpc,
    accepter_vpc,
    auto_accept=peered_vpcs_config.auto_accept,
)

export("vpc_a_id", requester_vpc.vpc.id)
export("vpc_b_id", accepter_vpc.vpc.id)
export("peering_connection_id", vpc_peer.peering_connection.id)
export(
    "requester_vpc", vpc_exports(requester_vpc, [peered_vpcs_config.accepter.vpc_name])
)
export(
    "accepter_vpc", vpc_exports(accepter_vpc, [peered_vpcs_config.requester.vpc_name])
)
