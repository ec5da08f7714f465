"""Typed resources of the JIRA REST API, version 2."""

from jira_rest_client.v2.application_role import ApplicationRole
from jira_rest_client.v2.base import Entity
from jira_rest_client.v2.group import Group
from jira_rest_client.v2.item import Item
from jira_rest_client.v2.user import User

__all__ = ["ApplicationRole", "Entity", "Group", "Item", "User"]
