"""Functional core - pure scheduling logic with no I/O."""

from .events import (
    Event,
    EventParseError,
    InvalidIntervalError,
    find_invalid_intervals,
    parse_events,
)
from .scheduler import DISCARD, INVALID_POLICIES, REJECT, max_attendable_events

__all__ = [
    # Events
    "Event",
    "EventParseError",
    "InvalidIntervalError",
    "find_invalid_intervals",
    "parse_events",
    # Scheduler
    "max_attendable_events",
    "REJECT",
    "DISCARD",
    "INVALID_POLICIES",
]
