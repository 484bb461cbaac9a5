from unittest import mock

import pytest

from vpc_peering.lib.pulumi_helper import parse_stack


def test_parse_stack():
    with mock.patch(
        "vpc_peering.lib.pulumi_helper.get_stack",
        return_value="infrastructure.aws.vpc_peering.Dev",
    ):
        stack_info = parse_stack()
    assert stack_info.project == "vpc-peering"
    assert stack_info.environment == "dev"
    assert stack_info.full_name == "infrastructure.aws.vpc_peering.Dev"
    assert stack_info.resource_prefix == "vpc-peering-dev"


def test_parse_stack_requires_namespace():
    with (
        mock.patch("vpc_peering.lib.pulumi_helper.get_stack", return_value="dev"),
        pytest.raises(ValueError, match="is not named"),
    ):
        parse_stack()
