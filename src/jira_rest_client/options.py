"""Query parameter and header builders.

Option objects hold optional fields; a field left as None is omitted from the
request entirely, never replaced with a default. The builders are pure
functions returning fresh ordered dicts.

Example:
    ```python
    from jira_rest_client.options import Expand, Pagination, build_query, expand_query

    params = build_query(
        {"username": "fred"},
        Pagination(start_at=0, max_results=50).to_query(),
        expand_query([Expand.GROUPS, Expand.APPLICATION_ROLES]),
    )
    # {"username": "fred", "startAt": "0", "maxResults": "50",
    #  "expand": "groups,applicationRoles"}
    ```
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum


class Expand(str, Enum):
    """Sub-resources the user endpoints can embed in their response."""

    GROUPS = "groups"
    APPLICATION_ROLES = "applicationRoles"


@dataclass(frozen=True)
class Pagination:
    """Offset paging for listing endpoints."""

    start_at: int | None = None
    max_results: int | None = None

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.start_at is not None:
            query["startAt"] = str(self.start_at)
        if self.max_results is not None:
            query["maxResults"] = str(self.max_results)
        return query


@dataclass(frozen=True)
class UserOptions:
    """Activity filters for user search."""

    include_inactive: bool | None = None
    include_active: bool | None = None

    def to_query(self) -> dict[str, str]:
        query: dict[str, str] = {}
        if self.include_inactive is not None:
            query["includeInactive"] = _bool(self.include_inactive)
        if self.include_active is not None:
            query["includeActive"] = _bool(self.include_active)
        return query


@dataclass(frozen=True)
class ApplicationRoleOptions:
    """Conditional update options for application roles.

    Attributes:
        if_match: Version hash of the roles as last read. When sent, the server
            rejects the update if its current hash differs.
    """

    if_match: str | None = None

    def to_headers(self) -> dict[str, str]:
        if self.if_match is None:
            return {}
        return {"If-Match": self.if_match}


def expand_query(expand: Iterable[Expand]) -> dict[str, str]:
    """Serialize expand tokens as a single comma-joined ``expand`` parameter.

    Tokens keep their input order, repeats are dropped. No tokens means no
    parameter at all.
    """
    tokens = dict.fromkeys(Expand(token).value for token in expand)
    value = ",".join(tokens)
    if not value:
        return {}
    return {"expand": value}


def build_query(*parts: Mapping[str, str] | None) -> dict[str, str]:
    """Merge query mappings left to right; later keys win, None parts are skipped."""
    query: dict[str, str] = {}
    for part in parts:
        if part:
            query.update(part)
    return query


def _bool(value: bool) -> str:
    return "true" if value else "false"
