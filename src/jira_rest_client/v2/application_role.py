"""REST access to JIRA application roles.

See: https://docs.atlassian.com/software/jira/docs/api/REST/7.6.1/#api/2/applicationrole
"""

from urllib.parse import quote

from pydantic import Field

from jira_rest_client.client import Client, Resp
from jira_rest_client.options import ApplicationRoleOptions
from jira_rest_client.v2.base import Entity

RESOURCE = "applicationrole"


class ApplicationRole(Entity):
    """An application role (JIRA Core, JIRA Software, ...).

    Only ``groups`` and ``default_groups`` can be changed; everything else is
    reported by the server and is read-only.
    """

    key: str = Field(default="", frozen=True)
    name: str = Field(default="", frozen=True)
    groups: list[str] = Field(default_factory=list)
    default_groups: list[str] = Field(default_factory=list, alias="defaultGroups")
    selected_by_default: bool = Field(default=False, alias="selectedByDefault", frozen=True)
    defined: bool = Field(default=False, frozen=True)
    number_of_seats: int = Field(default=0, alias="numberOfSeats", frozen=True)
    remaining_seats: int = Field(default=0, alias="remainingSeats", frozen=True)
    user_count: int = Field(default=0, alias="userCount", frozen=True)
    user_count_description: str = Field(default="", alias="userCountDescription", frozen=True)
    has_unlimited_seats: bool = Field(default=False, alias="hasUnlimitedSeats", frozen=True)
    platform: bool = Field(default=False, frozen=True)

    @classmethod
    async def from_key(cls, client: Client, key: str) -> Resp["ApplicationRole"]:
        """Fetch a single role by key."""
        return await client.get_resp(f"{RESOURCE}/{quote(key, safe='')}", cls)

    @classmethod
    async def all(cls, client: Client) -> Resp[list["ApplicationRole"]]:
        """Fetch every role. The response headers carry the roles' version hash."""
        return await client.get_resp(RESOURCE, list[cls])

    @classmethod
    async def update_bulk(
        cls,
        client: Client,
        roles: list["ApplicationRole"],
        options: ApplicationRoleOptions | None = None,
    ) -> Resp[list["ApplicationRole"]]:
        """Update several roles at once.

        Args:
            client: Client to send through; it is not modified.
            roles: Roles carrying the new ``groups``/``default_groups``.
            options: ``if_match`` makes the update conditional on the
                version hash still matching the server's.
        """
        if options is not None:
            client = client.with_headers(options.to_headers())
        return await client.put_resp(RESOURCE, list[cls], json=roles)

    async def update(self, client: Client, options: ApplicationRoleOptions | None = None) -> Resp["ApplicationRole"]:
        """Update this role on the server.

        The whole role is sent; the server ignores the read-only fields.
        """
        if options is not None:
            client = client.with_headers(options.to_headers())
        return await client.put_resp(f"{RESOURCE}/{quote(self.key, safe='')}", type(self), json=self)
