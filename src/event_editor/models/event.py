"""Event draft data model."""

import re
from datetime import datetime
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..utils.date_utils import parse_instant
from .collective import ParentCollective

# Fields holding instants, edited as wall-clock values
DATE_FIELDS = ("startsAt", "endsAt")

# Fields no edit may replace
READ_ONLY_FIELDS = ("parentCollective", "parent_collective")

# Tiers are edited elsewhere and passed through verbatim
Tier = dict[str, Any]

_SLUG_PREFIX_RE = re.compile(r".*/")


def normalize_slug(slug: Any) -> str:
    """Strip any "collective/" style prefix from a slug."""
    if not slug:
        return ""
    return _SLUG_PREFIX_RE.sub("", str(slug))


class Location(BaseModel):
    """Event location."""

    # Leaves hold whatever the location input sends, blanks included
    name: Any = None
    address: Any = None
    country: Any = None
    lat: Any = None
    long: Any = None

    model_config = {"frozen": True, "extra": "allow"}


class EventDraft(BaseModel):
    """In-progress copy of an event record being edited."""

    # Identifiers
    id: Any = None
    slug: str = ""

    # Basic properties, stored unchecked
    name: Any = ""
    description: Any = None
    long_description: Any = None

    # Time properties, always stored as UTC instants
    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None
    timezone: str = "UTC"

    # A Location when given a mapping, otherwise kept as-is
    location: Any = None

    private_instructions: Any = None

    # Ownership
    parent_collective: Optional[ParentCollective] = None

    tiers: Any = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    @field_validator("slug", mode="before")
    @classmethod
    def _strip_slug_prefix(cls, value: Any) -> str:
        return normalize_slug(value)

    @field_validator("name", mode="before")
    @classmethod
    def _name_or_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("timezone", mode="before")
    @classmethod
    def _timezone_or_utc(cls, value: Any) -> str:
        return "UTC" if value is None else str(value)

    @field_validator("location", mode="before")
    @classmethod
    def _mapping_as_location(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return Location.model_validate(value)
        return value

    @field_validator("starts_at", "ends_at", mode="before")
    @classmethod
    def _as_utc_instant(cls, value: Any) -> Optional[datetime]:
        if value is None or value == "":
            return None
        return parse_instant(value)

    @field_validator("tiers", mode="before")
    @classmethod
    def _tiers_or_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    @classmethod
    def from_source(cls, source: Optional[Union["EventDraft", dict[str, Any]]]) -> "EventDraft":
        """
        Create a draft by copying an external event record.

        Args:
            source: Source event record, or None for an empty draft

        Returns:
            New EventDraft with the slug prefix stripped
        """
        if source is None:
            return cls()
        if isinstance(source, EventDraft):
            return source.model_copy()
        return cls.model_validate(dict(source))

    def to_record(self, json_safe: bool = False) -> dict[str, Any]:
        """
        Dump the draft keyed by wire (camelCase) names.

        Args:
            json_safe: Serialize instants as ISO-8601 strings

        Returns:
            Dict representation of the draft
        """
        return self.model_dump(by_alias=True, mode="json" if json_safe else "python")

    def merge(self, partial: dict[str, Any]) -> "EventDraft":
        """
        Shallow-merge top-level values into a new draft.

        Args:
            partial: Values keyed by wire or attribute names

        Returns:
            New EventDraft; the original is unchanged
        """
        if not partial:
            return self
        return type(self).model_validate({**self.to_record(), **_wire_keys(partial)})

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a top-level value by its wire name."""
        return self.to_record().get(key, default)


def _wire_keys(partial: dict[str, Any]) -> dict[str, Any]:
    # Attribute names such as starts_at would otherwise collide with startsAt
    return {
        (to_camel(key) if key in EventDraft.model_fields else key): value
        for key, value in partial.items()
    }
