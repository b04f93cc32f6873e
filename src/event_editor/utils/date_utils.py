"""Date and time utilities for converting between instants and wall-clock values."""

from datetime import datetime
from typing import Optional, Protocol, Union

import pytz

from .exceptions import InvalidDateInput

# Wall-clock format used by datetime-local inputs
WALL_CLOCK_FORMAT = "%Y-%m-%dT%H:%M"


def ensure_utc(dt: datetime) -> datetime:
    """
    Ensure datetime is in UTC.

    Args:
        dt: Datetime to convert

    Returns:
        UTC datetime
    """
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt.astimezone(pytz.utc)


def get_timezone(name: Optional[str]) -> pytz.BaseTzInfo:
    """
    Resolve an IANA timezone identifier.

    An empty or missing name resolves to UTC.

    Raises:
        InvalidDateInput: If the identifier is unknown
    """
    if not name:
        return pytz.utc
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError as e:
        raise InvalidDateInput(f"Unknown timezone: {name}") from e


def parse_instant(value: Union[str, datetime]) -> datetime:
    """
    Parse an absolute instant into a UTC datetime.

    Naive values are interpreted as UTC.

    Raises:
        InvalidDateInput: If a string value is not ISO-8601
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    try:
        # fromisoformat only learned the "Z" suffix in Python 3.11
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, TypeError, ValueError) as e:
        raise InvalidDateInput(f"Invalid instant: {value!r}") from e
    return ensure_utc(parsed)


def to_instant(wall_clock: str, timezone: Optional[str]) -> datetime:
    """
    Interpret a wall-clock string as local to a timezone.

    Args:
        wall_clock: Local date and time, e.g. "2024-01-01T12:00"
        timezone: IANA timezone name the wall-clock value belongs to

    Returns:
        The corresponding UTC instant

    Raises:
        InvalidDateInput: If the value or the timezone is invalid
    """
    tz = get_timezone(timezone)
    try:
        local = datetime.fromisoformat(wall_clock)
    except (TypeError, ValueError) as e:
        raise InvalidDateInput(f"Invalid wall-clock value: {wall_clock!r}") from e

    # An explicit offset already pins the instant
    if local.tzinfo is not None:
        return ensure_utc(local)
    return tz.localize(local).astimezone(pytz.utc)


def to_wall_clock(instant: Optional[Union[str, datetime]], timezone: Optional[str]) -> str:
    """
    Render an instant as wall-clock time in a timezone.

    Args:
        instant: Absolute instant (datetime or ISO-8601 string)
        timezone: IANA timezone name to render in

    Returns:
        Wall-clock string formatted as YYYY-MM-DDTHH:mm, or "" if there is no instant

    Raises:
        InvalidDateInput: If the instant or the timezone is invalid
    """
    if instant is None or instant == "":
        return ""
    tz = get_timezone(timezone)
    return parse_instant(instant).astimezone(tz).strftime(WALL_CLOCK_FORMAT)


class DateConverter(Protocol):
    """Protocol for date conversion capabilities."""

    def to_instant(self, wall_clock: str, timezone: Optional[str]) -> datetime:
        """Convert a wall-clock value local to ``timezone`` into a UTC instant."""
        ...

    def to_wall_clock(
        self, instant: Optional[Union[str, datetime]], timezone: Optional[str]
    ) -> str:
        """Render a UTC instant as wall-clock time local to ``timezone``."""
        ...


class PytzDateConverter:
    """Date converter backed by the pytz timezone database."""

    def to_instant(self, wall_clock: str, timezone: Optional[str]) -> datetime:
        return to_instant(wall_clock, timezone)

    def to_wall_clock(
        self, instant: Optional[Union[str, datetime]], timezone: Optional[str]
    ) -> str:
        return to_wall_clock(instant, timezone)


default_converter = PytzDateConverter()
