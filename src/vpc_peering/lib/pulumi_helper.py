from dataclasses import dataclass

from pulumi import get_stack


@dataclass
class StackInfo:
    """Project and environment labels parsed from a stack name."""

    project: str
    environment: str
    full_name: str

    @property
    def resource_prefix(self) -> str:
        return f"{self.project}-{self.environment}"


def parse_stack() -> StackInfo:
    """Split the current stack name into the labels applied to its resources.

    Stacks are named `<namespace>.<project>.<Environment>`, e.g.
    `infrastructure.aws.vpc_peering.Dev` yields the project `vpc-peering` and
    the environment `dev`.

    :raises ValueError: If the stack name has no namespace to take the project
        name from.

    :returns: Parsed stack information for use in business logic.

    :rtype: StackInfo
    """
    stack = get_stack()
    if "." not in stack:
        msg = f"Stack {stack} is not named <namespace>.<project>.<Environment>"
        raise ValueError(msg)
    namespace, environment = stack.rsplit(".", 1)
    return StackInfo(
        project=namespace.rsplit(".", 1)[-1].replace("_", "-"),
        environment=environment.lower(),
        full_name=stack,
    )
