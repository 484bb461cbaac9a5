# ruff: noqa: E501

"""Pulumi component for peering two SimpleVPC networks.

The peering connection is requested from one VPC and auto-accepted by the
other, and a route is added to each VPC's route table that sends traffic for
the peer's CIDR block across the connection.
"""

import pulumi
from pulumi import ComponentResource, ResourceOptions
from pulumi_aws import ec2
from pydantic import BaseModel, model_validator

from vpc_peering.components.aws.network import SimpleVPC, SimpleVPCConfig


def check_peerable(requester: SimpleVPCConfig, accepter: SimpleVPCConfig) -> None:
    """Verify that two VPC definitions can be joined by a peering connection.

    :param requester: Configuration of the VPC that requests the peering connection.
    :type requester: SimpleVPCConfig

    :param accepter: Configuration of the VPC that accepts the peering connection.
    :type accepter: SimpleVPCConfig

    :raises ValueError: If both sides are the same network, if their address
        spaces overlap, or if they are in different regions.
    """
    if requester.vpc_name == accepter.vpc_name:
        msg = f"A VPC cannot be peered with itself: {requester.vpc_name}"
        raise ValueError(msg)
    if requester.cidr_block.overlaps(accepter.cidr_block):
        msg = f"The CIDR block {requester.cidr_block} of {requester.vpc_name} overlaps with {accepter.cidr_block} of {accepter.vpc_name}"
        raise ValueError(msg)
    if requester.region != accepter.region:
        msg = f"Peered VPCs must be in the same region, got {requester.region} and {accepter.region}"
        raise ValueError(msg)


class PeeredVPCsConfig(BaseModel):
    """Schema definition for a pair of VPCs and the peering connection between them."""

    peering_name: str
    requester: SimpleVPCConfig
    accepter: SimpleVPCConfig
    auto_accept: bool = True

    @model_validator(mode="after")
    def check_networks_can_peer(self):
        check_peerable(self.requester, self.accepter)
        return self


class VPCPeeringConnection(ComponentResource):
    """Component for creating a VPC peering connection and populating routes."""

    def __init__(
        self,
        vpc_peer_name: str,
        requester_vpc: SimpleVPC,
        accepter_vpc: SimpleVPC,
        auto_accept: bool = True,  # noqa: FBT001, FBT002
        opts: ResourceOptions | None = None,
    ):
        """Create a peering connection and associated routes between two managed VPCs.

        :param vpc_peer_name: The name of the peering connection
        :type vpc_peer_name: str

        :param requester_vpc: The VPC object that requests the peering connection.
        :type requester_vpc: SimpleVPC

        :param accepter_vpc: The VPC object that accepts the peering connection.
        :type accepter_vpc: SimpleVPC

        :param auto_accept: Accept the connection as part of creating it.
        :type auto_accept: bool

        :param opts: Resource option definitions to propagate to the child resources
        :type opts: Optional[ResourceOptions]
        """
        check_peerable(requester_vpc.vpc_config, accepter_vpc.vpc_config)
        super().__init__(
            "vpc_peering:aws:VPCPeeringConnection", vpc_peer_name, None, opts
        )
        resource_options = ResourceOptions.merge(
            ResourceOptions(parent=self),
            opts,
        )
        requester_name = requester_vpc.vpc_config.vpc_name
        accepter_name = accepter_vpc.vpc_config.vpc_name
        pulumi.log.debug(
            f"Declaring peering connection {vpc_peer_name} from {requester_name} to {accepter_name}"
        )
        self.peering_connection = ec2.VpcPeeringConnection(
            f"{requester_name}-to-{accepter_name}-vpc-peer",
            auto_accept=auto_accept,
            vpc_id=requester_vpc.vpc.id,
            peer_vpc_id=accepter_vpc.vpc.id,
            tags=requester_vpc.vpc_config.merged_tags(
                {"Name": f"{requester_name} to {accepter_name} peer"}
            ),
            opts=resource_options,
        )
        # Each side routes the other side's whole network across the peer
        self.requester_to_accepter_route = ec2.Route(
            f"{requester_name}-to-{accepter_name}-route",
            route_table_id=requester_vpc.route_table.id,
            destination_cidr_block=accepter_vpc.vpc.cidr_block,
            vpc_peering_connection_id=self.peering_connection.id,
            opts=resource_options,
        )
        self.accepter_to_requester_route = ec2.Route(
            f"{accepter_name}-to-{requester_name}-route",
            route_table_id=accepter_vpc.route_table.id,
            destination_cidr_block=requester_vpc.vpc.cidr_block,
            vpc_peering_connection_id=self.peering_connection.id,
            opts=resource_options,
        )

        self.register_outputs(
            {
                "peering_connection": self.peering_connection,
            }
        )
