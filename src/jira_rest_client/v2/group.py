"""JIRA groups."""

from pydantic import Field

from jira_rest_client.v2.base import Entity


class Group(Entity):
    """A group as embedded in user and application role responses."""

    name: str = Field(default="", frozen=True)
    self_link: str = Field(default="", alias="self", frozen=True)
