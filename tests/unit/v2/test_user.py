"""Tests for user resources."""

import pytest

from jira_rest_client.errors import DecodeError
from jira_rest_client.errors.handler import type_adapter
from jira_rest_client.options import Expand, Pagination, UserOptions
from jira_rest_client.testing import create_mock_response
from jira_rest_client.v2 import ApplicationRole, Group, Item, User

FRED = {
    "self": "https://jira.example.com/rest/api/2/user?username=fred",
    "key": "fred",
    "name": "fred",
    "emailAddress": "fred@example.com",
    "avatarUrls": {"48x48": "https://jira.example.com/secure/useravatar?size=large&ownerId=fred"},
    "displayName": "Fred F. User",
    "active": True,
    "timeZone": "Australia/Sydney",
    "groups": {
        "size": 2,
        "items": [
            {"name": "jira-users", "self": "https://jira.example.com/rest/api/2/group?groupname=jira-users"},
            {"name": "jira-admins", "self": "https://jira.example.com/rest/api/2/group?groupname=jira-admins"},
        ],
    },
    "applicationRoles": {"size": 1, "items": [{"key": "jira-core", "name": "JIRA Core"}]},
}


class TestModel:
    def test_parses_server_payload(self):
        user = User.model_validate(FRED)

        assert user.display_name == "Fred F. User"
        assert user.self_link.endswith("username=fred")
        assert user.time_zone == "Australia/Sydney"
        assert "48x48" in user.avatar_urls

    def test_expanded_lists_decode(self):
        user = User.model_validate(FRED)

        groups = user.list_groups()
        roles = user.list_application_roles()

        assert [group.name for group in groups] == ["jira-users", "jira-admins"]
        assert all(isinstance(group, Group) for group in groups)
        assert roles[0] == ApplicationRole(key="jira-core", name="JIRA Core")

    def test_unexpanded_lists_are_empty(self):
        user = User.model_validate({"name": "fred"})

        assert user.groups is None
        assert user.list_groups() == []
        assert user.list_application_roles() == []

    def test_repeated_decodes_reuse_the_adapter(self):
        user = User.model_validate(FRED)
        user.list_groups()
        hits = type_adapter.cache_info().hits

        user.list_groups()

        assert type_adapter.cache_info().hits == hits + 1

    def test_malformed_items_raise_decode_error(self):
        user = User(groups=Item(size=1, items=["not-a-group"]))

        with pytest.raises(DecodeError) as exc_info:
            user.list_groups()

        assert "not-a-group" in exc_info.value.raw_body


class TestOperations:
    async def test_search_with_options_and_page(self, client_factory):
        client, transport = client_factory(create_mock_response([FRED]))

        users = await User.search(
            client,
            "fred",
            UserOptions(include_inactive=True, include_active=True),
            Pagination(start_at=0, max_results=25),
        )

        assert [user.key for user in users] == ["fred"]
        request = transport.last_request
        assert request.url.path == "/rest/api/2/user/search"
        assert dict(request.url.params) == {
            "username": "fred",
            "includeInactive": "true",
            "includeActive": "true",
            "startAt": "0",
            "maxResults": "25",
        }

    async def test_search_without_options(self, client_factory):
        client, transport = client_factory(create_mock_response([]))

        assert await User.search(client, "nobody") == []
        assert dict(transport.last_request.url.params) == {"username": "nobody"}

    async def test_from_username_with_expand(self, client_factory):
        client, transport = client_factory(create_mock_response(FRED))

        user = await User.from_username(client, "fred", [Expand.GROUPS, Expand.APPLICATION_ROLES])

        assert user.name == "fred"
        params = transport.last_request.url.params
        assert params["username"] == "fred"
        assert params["expand"] == "groups,applicationRoles"

    async def test_from_key_without_expand(self, client_factory):
        client, transport = client_factory(create_mock_response(FRED))

        await User.from_key(client, "fred")

        params = transport.last_request.url.params
        assert dict(params) == {"key": "fred"}
        assert transport.last_request.url.path == "/rest/api/2/user"
