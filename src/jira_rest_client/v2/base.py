"""Shared base for JIRA entity models."""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """Base model for JIRA resources.

    Fields are declared with their JSON (camelCase) aliases and can also be
    populated by Python name. Unknown fields returned by the server are ignored.
    Fields declared with ``Field(frozen=True)`` are populated by the server only
    and raise on assignment.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)

    def __str__(self) -> str:
        return self.to_json()
