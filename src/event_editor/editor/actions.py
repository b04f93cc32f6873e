"""Edit actions understood by the change handler."""

from dataclasses import dataclass, field
from typing import Any, Union

from ..models.event import DATE_FIELDS, Tier


@dataclass(frozen=True)
class SetField:
    """Set a value at a dotted field path."""

    path: str
    value: Any


@dataclass(frozen=True)
class ChangeDate:
    """Set startsAt or endsAt from a wall-clock value in the draft's timezone."""

    field: str
    wall_clock: str

    def __post_init__(self) -> None:
        if self.field not in DATE_FIELDS:
            raise ValueError(f"Not a date field: {self.field}")


@dataclass(frozen=True)
class ChangeTimezone:
    """Switch timezone, keeping the wall-clock time of both dates."""

    zone: str


@dataclass(frozen=True)
class SetTiers:
    """Replace the tier list with the tier editor's output."""

    tiers: list[Tier] = field(default_factory=list)


@dataclass(frozen=True)
class Submit:
    """Hand the current draft to the submit callback."""


Action = Union[SetField, ChangeDate, ChangeTimezone, SetTiers, Submit]


def action_for_change(field_path: str, value: Any) -> Action:
    """
    Route a raw field edit to its action.

    Args:
        field_path: Dotted path of the edited field
        value: New value from the input

    Returns:
        ChangeDate for startsAt/endsAt, ChangeTimezone for a non-empty
        timezone, SetField otherwise (with None timezones as "")
    """
    if field_path in DATE_FIELDS:
        return ChangeDate(field_path, value)
    if field_path == "timezone":
        # A cleared zone is stored empty rather than defaulting to UTC
        return ChangeTimezone(value) if value else SetField(field_path, value or "")
    return SetField(field_path, value)
