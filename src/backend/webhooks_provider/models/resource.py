"""Local desired-state models for the webhooks integration resource."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class TrackingState(StrEnum):
    """Relationship between local tracking and the remote singleton."""

    UNTRACKED = "untracked"
    TRACKED = "tracked"
    ORPHANED = "orphaned"


class HookEntry(BaseModel):
    """A named webhook endpoint as declared by the user."""

    name: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)


class WebhooksRecord(BaseModel):
    """Desired state of the webhooks integration."""

    name: str = Field(..., description="Label of the integration as tracked locally")
    url: str = Field(..., description="Legacy single-hook target, superseded by hooks")
    use_custom_payload: bool = False
    custom_payload: str = ""
    encode_as_form: bool = False
    headers: str = Field(default="", description="Serialized header set sent with each hook")
    hooks: list[HookEntry] = Field(default_factory=list)


@dataclass
class ResourceData:
    """Engine-owned handle for one resource instance.

    Holds the local identifier and the attribute mapping the declarative
    engine diffs against. An empty ``id`` means the resource is untracked.
    """

    id: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    orphaned: bool = False

    @property
    def state(self) -> TrackingState:
        if not self.id:
            return TrackingState.UNTRACKED
        if self.orphaned:
            return TrackingState.ORPHANED
        return TrackingState.TRACKED

    def get(self, key: str, default: Any = None) -> Any:
        return self.attributes.get(key, default)

    def set_id(self, identifier: str) -> None:
        self.id = identifier
        self.orphaned = False

    def mark_orphaned(self) -> None:
        self.orphaned = True

    def replace_attributes(self, values: Mapping[str, Any]) -> None:
        """Overwrite every tracked attribute (no partial merge)."""
        self.attributes = dict(values)

    def record(self) -> WebhooksRecord:
        """Validate the current attributes as a desired-state record."""
        return WebhooksRecord.model_validate(self.attributes)
