import pytest
from pydantic import ValidationError

from vpc_peering.components.aws.network import SimpleVPCConfig
from vpc_peering.components.aws.peering import PeeredVPCsConfig, check_peerable


def test_peered_vpcs_config(requester_vpc_args, accepter_vpc_args):
    peered = PeeredVPCsConfig(
        peering_name="a-to-b",
        requester=requester_vpc_args,
        accepter=accepter_vpc_args,
    )
    assert peered.auto_accept
    assert not peered.requester.cidr_block.overlaps(peered.accepter.cidr_block)


@pytest.mark.parametrize(
    ("cidr_block", "subnet_cidr_block"),
    [
        ("10.0.0.0/16", "10.0.2.0/24"),
        ("10.0.128.0/17", "10.0.128.0/24"),
    ],
)
def test_overlapping_networks_rejected(
    requester_vpc_args, accepter_vpc_args, cidr_block, subnet_cidr_block
):
    accepter_vpc_args["cidr_block"] = cidr_block
    accepter_vpc_args["subnet_cidr_block"] = subnet_cidr_block
    with pytest.raises(ValidationError, match="overlaps"):
        PeeredVPCsConfig(
            peering_name="a-to-b",
            requester=requester_vpc_args,
            accepter=accepter_vpc_args,
        )


def test_same_network_rejected(requester_vpc_args):
    with pytest.raises(ValidationError, match="peered with itself"):
        PeeredVPCsConfig(
            peering_name="a-to-a",
            requester=requester_vpc_args,
            accepter=dict(requester_vpc_args),
        )


@pytest.mark.parametrize("auto_accept", [True, False])
def test_peered_vpcs_must_share_a_region(
    requester_vpc_args, accepter_vpc_args, auto_accept
):
    accepter_vpc_args["region"] = "us-west-2"
    accepter_vpc_args["availability_zone"] = "us-west-2a"
    with pytest.raises(ValidationError, match="same region"):
        PeeredVPCsConfig(
            peering_name="a-to-b",
            requester=requester_vpc_args,
            accepter=accepter_vpc_args,
            auto_accept=auto_accept,
        )


def test_manually_accepted_peering_in_one_region(
    requester_vpc_args, accepter_vpc_args
):
    peered = PeeredVPCsConfig(
        peering_name="a-to-b",
        requester=requester_vpc_args,
        accepter=accepter_vpc_args,
        auto_accept=False,
    )
    assert not peered.auto_accept
    assert peered.requester.region == peered.accepter.region


def test_check_peerable_raises_value_error(requester_vpc_args, accepter_vpc_args):
    requester = SimpleVPCConfig(**requester_vpc_args)
    accepter_vpc_args["cidr_block"] = "10.0.0.0/16"
    accepter_vpc_args["subnet_cidr_block"] = "10.0.2.0/24"
    accepter = SimpleVPCConfig(**accepter_vpc_args)
    with pytest.raises(ValueError, match="overlaps"):
        check_peerable(requester, accepter)
