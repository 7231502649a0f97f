"""ISO8601 dates and intervals in simulation time.

All datetimes are timezone-aware UTC. ``MINIMUM_VALUE`` and ``MAXIMUM_VALUE``
stand in for negative and positive infinity.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

MINIMUM_VALUE = datetime.min.replace(tzinfo=timezone.utc)
MAXIMUM_VALUE = datetime.max.replace(tzinfo=timezone.utc)

# Year 0 and hour 24 are outside datetime's range, so the customary
# unbounded literals map straight to the sentinels.
_MINIMUM_LITERAL = "0000-01-01T00:00:00Z"
_MAXIMUM_LITERAL = "9999-12-31T24:00:00Z"


def parse_date(text: str) -> datetime:
    """Parse an ISO8601 date string into a UTC-aware datetime.

    A trailing ``Z`` is accepted. Naive values are taken to be UTC.
    ``0000-01-01T00:00:00Z`` and ``9999-12-31T24:00:00Z`` parse to
    MINIMUM_VALUE and MAXIMUM_VALUE.

    Raises:
        ValueError: If ``text`` is not a valid ISO8601 date.
    """
    if not isinstance(text, str):
        raise ValueError(f"Expected an ISO8601 string, got {type(text).__name__}")
    value = text.strip()
    if value.upper() == _MINIMUM_LITERAL:
        return MINIMUM_VALUE
    if value.upper() == _MAXIMUM_LITERAL:
        return MAXIMUM_VALUE
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_date(value: datetime) -> str:
    """Format a datetime as ISO8601 with a ``Z`` suffix."""
    if value == MINIMUM_VALUE:
        return _MINIMUM_LITERAL
    if value == MAXIMUM_VALUE:
        return _MAXIMUM_LITERAL
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def seconds_between(start: datetime, stop: datetime) -> float:
    """Signed number of seconds from ``start`` to ``stop``."""
    return (stop - start).total_seconds()


@dataclass(frozen=True)
class TimeInterval:
    """A span of simulation time.

    Attributes:
        start: Beginning of the interval.
        stop: End of the interval.
        is_start_included: Whether ``start`` itself is part of the interval.
        is_stop_included: Whether ``stop`` itself is part of the interval.
    """

    start: datetime
    stop: datetime
    is_start_included: bool = True
    is_stop_included: bool = True

    @classmethod
    def from_iso8601(cls, text: str) -> TimeInterval:
        """Parse the ``start/stop`` interval notation.

        Raises:
            ValueError: If the string is not two ISO8601 dates split by ``/``.
        """
        parts = text.split("/") if isinstance(text, str) else []
        if len(parts) != 2:
            raise ValueError(f"Invalid ISO8601 interval: {text!r}")
        return cls(parse_date(parts[0]), parse_date(parts[1]))

    @property
    def is_empty(self) -> bool:
        if self.stop < self.start:
            return True
        if self.stop == self.start:
            return not (self.is_start_included and self.is_stop_included)
        return False

    def contains(self, date: datetime) -> bool:
        if self.is_empty:
            return False
        if date < self.start or date > self.stop:
            return False
        if date == self.start and not self.is_start_included:
            return False
        if date == self.stop and not self.is_stop_included:
            return False
        return True

    def to_iso8601(self) -> str:
        return f"{format_date(self.start)}/{format_date(self.stop)}"


INFINITE = TimeInterval(MINIMUM_VALUE, MAXIMUM_VALUE)
