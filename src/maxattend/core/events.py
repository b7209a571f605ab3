"""Pure event domain logic - no I/O dependencies."""

from dataclasses import dataclass
from typing import Any, Iterable


class EventParseError(ValueError):
    """Raw input could not be turned into an Event."""


class InvalidIntervalError(ValueError):
    """One or more events have start > end (or a negative day)."""

    def __init__(self, invalid: list[tuple[int, "Event"]]):
        self.invalid = invalid
        details = ", ".join(f"#{i} {e.format()}" for i, e in invalid)
        super().__init__(f"{len(invalid)} invalid interval(s): {details}")


@dataclass(frozen=True)
class Event:
    """An event attendable on any single day in [start, end], inclusive."""

    start: int
    end: int

    @property
    def is_valid(self) -> bool:
        return 0 <= self.start <= self.end

    @property
    def length(self) -> int:
        """Number of days the event can be attended on."""
        if not self.is_valid:
            return 0
        return self.end - self.start + 1

    def format(self) -> str:
        return f"[{self.start}, {self.end}]"

    @classmethod
    def from_raw(cls, data: Any) -> "Event":
        """
        Create an Event from a decoded JSON value.

        Accepts a two-item list/tuple or a dict with "start" and "end".
        Day values must be non-negative integers. start > end is allowed
        here; it is the scheduler's job to reject or discard it.
        """
        if isinstance(data, dict):
            try:
                start, end = data["start"], data["end"]
            except KeyError as e:
                raise EventParseError(f"event {data!r} is missing {e.args[0]!r}") from e
        elif isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise EventParseError(f"event {data!r} must have exactly two days")
            start, end = data
        else:
            raise EventParseError(f"event {data!r} must be a [start, end] pair or an object")
        return cls(start=_parse_day(start), end=_parse_day(end))

    @classmethod
    def from_string(cls, text: str) -> "Event":
        """Parse "START:END" (or "START-END") into an Event."""
        for sep in (":", "-"):
            if sep in text:
                start, _, end = text.partition(sep)
                return cls(start=_parse_day(start.strip()), end=_parse_day(end.strip()))
        raise EventParseError(f"interval {text!r} must look like START:END")


def _parse_day(value: Any) -> int:
    # bool is an int subclass; true/false in JSON are never days.
    if isinstance(value, bool):
        raise EventParseError(f"day {value!r} is not an integer")
    if isinstance(value, str):
        if not (value.isascii() and value.isdigit()):
            raise EventParseError(f"day {value!r} is not a non-negative integer")
        return int(value)
    if not isinstance(value, int):
        raise EventParseError(f"day {value!r} is not an integer")
    if value < 0:
        raise EventParseError(f"day {value} is negative")
    return value


def parse_events(data: Any) -> list[Event]:
    """
    Parse a decoded JSON document into events.

    Accepts a list of events, or an object with an "events" list.
    """
    if isinstance(data, dict) and "events" in data:
        data = data["events"]
    if not isinstance(data, list):
        raise EventParseError("expected a list of events")
    return [Event.from_raw(item) for item in data]


def find_invalid_intervals(events: Iterable[Event]) -> list[tuple[int, Event]]:
    """Return (index, event) for every event whose end precedes its start."""
    return [(i, e) for i, e in enumerate(events) if not e.is_valid]
