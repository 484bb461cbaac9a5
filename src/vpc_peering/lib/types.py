from enum import Enum, unique

from pydantic import BaseModel, field_validator

from vpc_peering.lib.aws.ec2_helper import aws_regions

REQUIRED_TAGS = {"Environment", "Project"}


@unique
class Environment(str, Enum):
    """Canonical reference for valid environment names."""

    ci = "ci"
    dev = "dev"
    qa = "qa"
    production = "production"


class AWSBase(BaseModel):
    """Base class for configuration objects to pass to AWS component resources."""

    tags: dict[str, str]
    region: str = "us-east-1"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.tags.update({"pulumi_managed": "true"})

    @field_validator("tags")
    @classmethod
    def enforce_tags(cls, tags: dict[str, str]) -> dict[str, str]:
        if not REQUIRED_TAGS.issubset(tags.keys()):
            msg = f"Not all required tags have been specified. Missing tags: {REQUIRED_TAGS.difference(tags.keys())}"  # noqa: E501
            raise ValueError(msg)
        try:
            Environment(tags["Environment"])
        except ValueError as exc:
            msg = "The Environment tag specified is not a valid environment"
            raise ValueError(msg) from exc
        return tags

    @field_validator("region")
    @classmethod
    def check_region(cls, region: str) -> str:
        if region not in aws_regions():
            msg = "The specified region does not exist"
            raise ValueError(msg)
        return region

    def merged_tags(self, *new_tags: dict[str, str]) -> dict[str, str]:
        """Return a dictionary of existing tags with the ones passed in.

        This generates a new dictionary of tags in order to allow for a broadly
        applicable set of tags to then be updated with specific tags to be set on child
        resources in a ComponentResource class.

        :param *new_tags: One or more dictionaries of specific tags to be set on
                            a child resource.
        :type new_tags: Dict[str, str]

        :returns: Merged dictionary of base tags and specific tags to be set on a child
                  resource.

        :rtype: Dict[str, str]
        """
        tag_dict = self.tags.copy()
        for tags in new_tags:
            tag_dict.update(tags)
        return tag_dict
