"""Maximum attendable events - greedy earliest-deadline-first scheduling.

Pure function - no I/O.

Outline:
    1. Sort a copy of the events by ascending start.
    2. Walk days in ascending order, keeping a min-heap of the end days of
       events that have started but were neither attended nor expired.
    3. Each pass: evict expired ends, jump over empty gaps, admit events
       starting today, then attend exactly one event (smallest end).

Attending more than one event per pass is wrong. With [1,10], [1,10], [2,2]
draining the heap on day 1 would use days 1 and 2 for the loose events
before [2,2] is ever admitted, giving 2 instead of 3.
"""

import heapq
import logging
from typing import Iterable

from .events import Event, InvalidIntervalError, find_invalid_intervals

logger = logging.getLogger(__name__)

REJECT = "reject"
DISCARD = "discard"
INVALID_POLICIES = (REJECT, DISCARD)


def max_attendable_events(events: Iterable[Event], on_invalid: str = REJECT) -> int:
    """
    Maximum number of events attendable at one event per day.

    Args:
        events: Events in any order. Never mutated.
        on_invalid: "reject" raises InvalidIntervalError listing every
            malformed event before computing; "discard" drops them.

    Returns:
        Count in the range [0, number of valid events].
    """
    if on_invalid not in INVALID_POLICIES:
        raise ValueError(f"on_invalid must be one of {INVALID_POLICIES}, got {on_invalid!r}")

    events = list(events)
    invalid = find_invalid_intervals(events)
    if invalid:
        if on_invalid == REJECT:
            raise InvalidIntervalError(invalid)
        logger.warning(f"Discarding {len(invalid)} invalid interval(s)")
        events = [e for e in events if e.is_valid]

    if not events:
        return 0

    # Ties on start (and on end in the heap) are broken arbitrarily; the
    # result does not depend on them.
    by_start = sorted(events, key=lambda e: e.start)

    # End days of events overlapping current_day. To report which event was
    # attended on which day, push (end, index) here and record the pair
    # where an event is attended below.
    ends: list[int] = []
    attended = 0
    i = 0
    current_day = by_start[0].start

    while i < len(by_start) or ends:
        while ends and ends[0] < current_day:
            heapq.heappop(ends)

        if not ends and i < len(by_start):
            current_day = by_start[i].start

        while i < len(by_start) and by_start[i].start == current_day:
            heapq.heappush(ends, by_start[i].end)
            i += 1

        # One event per pass, never a loop (see module docstring).
        if ends:
            heapq.heappop(ends)
            attended += 1
            current_day += 1

    logger.debug(f"Attendable: {attended} of {len(events)} events")
    return attended
