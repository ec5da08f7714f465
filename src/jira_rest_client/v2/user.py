"""REST access to JIRA users."""

from collections.abc import Iterable

from pydantic import Field

from jira_rest_client.client import Client
from jira_rest_client.options import Expand, Pagination, UserOptions, build_query, expand_query
from jira_rest_client.v2.application_role import ApplicationRole
from jira_rest_client.v2.base import Entity
from jira_rest_client.v2.group import Group
from jira_rest_client.v2.item import Item


class User(Entity):
    active: bool = False
    avatar_urls: dict[str, str] = Field(default_factory=dict, alias="avatarUrls")
    display_name: str = Field(default="", alias="displayName")
    email_address: str = Field(default="", alias="emailAddress")
    key: str = ""
    name: str = ""
    self_link: str = Field(default="", alias="self")
    time_zone: str = Field(default="", alias="timeZone")

    # Only present when requested with Expand
    groups: Item | None = None
    application_roles: Item | None = Field(default=None, alias="applicationRoles")

    @classmethod
    async def search(
        cls,
        client: Client,
        username: str,
        options: UserOptions | None = None,
        page: Pagination | None = None,
    ) -> list["User"]:
        """Search users by username, display name or email fragment."""
        params = build_query(
            {"username": username},
            options.to_query() if options else None,
            page.to_query() if page else None,
        )
        return await client.get("user/search", list[cls], params=params)

    @classmethod
    async def from_username(cls, client: Client, username: str, expand: Iterable[Expand] = ()) -> "User":
        params = build_query({"username": username}, expand_query(expand))
        return await client.get("user", cls, params=params)

    @classmethod
    async def from_key(cls, client: Client, key: str, expand: Iterable[Expand] = ()) -> "User":
        params = build_query({"key": key}, expand_query(expand))
        return await client.get("user", cls, params=params)

    def list_groups(self) -> list[Group]:
        """Groups embedded by ``Expand.GROUPS``; empty when not expanded."""
        if self.groups is None:
            return []
        return self.groups.decode(Group)

    def list_application_roles(self) -> list[ApplicationRole]:
        """Roles embedded by ``Expand.APPLICATION_ROLES``; empty when not expanded."""
        if self.application_roles is None:
            return []
        return self.application_roles.decode(ApplicationRole)
