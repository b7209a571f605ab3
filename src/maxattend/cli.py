"""maxattend CLI - count attendable events."""

import json
import logging
import sys
from pathlib import Path

import click

from .config import load_config
from .core import (
    DISCARD,
    Event,
    EventParseError,
    InvalidIntervalError,
    find_invalid_intervals,
    max_attendable_events,
    parse_events,
)


def _log_level(debug: bool, log_level: str) -> int:
    if debug:
        return logging.DEBUG
    # getLevelName maps known names to ints and anything else to a string.
    level = logging.getLevelName(log_level)
    return level if isinstance(level, int) else logging.WARNING


def _setup_logging(debug: bool, log_level: str) -> None:
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=_log_level(debug, log_level),
    )


def _read_events(intervals: tuple[str, ...], file: Path | None) -> list[Event]:
    """Events from positional intervals, a JSON file, or JSON on stdin."""
    if intervals:
        return [Event.from_string(text) for text in intervals]

    try:
        if file is not None:
            text = file.read_text(encoding="utf-8")
        else:
            text = sys.stdin.read()
    except (UnicodeDecodeError, OSError) as e:
        raise EventParseError(f"cannot read input: {e}") from e

    if not text.strip():
        return []

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise EventParseError(f"invalid JSON input: {e}") from e
    return parse_events(data)


def _load_or_exit(intervals: tuple[str, ...], file: Path | None) -> list[Event]:
    try:
        return _read_events(intervals, file)
    except EventParseError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


_input_options = [
    click.argument("intervals", nargs=-1),
    click.option(
        "--file",
        "-f",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        help="Read events as JSON from a file instead of stdin",
    ),
    click.option("--debug", is_flag=True, help="Enable debug logging"),
]


def input_options(func):
    for option in reversed(_input_options):
        func = option(func)
    return func


@click.group()
@click.version_option(package_name="maxattend")
def main():
    """maxattend - maximum events attendable at one per day.

    INTERVALS are START:END day pairs. Without them, events are read as JSON
    ([[start, end], ...] or [{"start": s, "end": e}, ...]) from --file or stdin.
    """
    pass


@main.command()
@input_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--discard-invalid", is_flag=True, help="Drop events with start > end instead of failing")
def count(intervals: tuple[str, ...], file: Path | None, debug: bool, as_json: bool, discard_invalid: bool):
    """Print the maximum number of attendable events."""
    config = load_config()
    _setup_logging(debug, config.log_level)

    events = _load_or_exit(intervals, file)
    policy = DISCARD if discard_invalid else config.invalid_intervals

    try:
        attendable = max_attendable_events(events, on_invalid=policy)
    except InvalidIntervalError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"events": len(events), "attendable": attendable}))
    else:
        click.echo(attendable)


@main.command()
@input_options
def check(intervals: tuple[str, ...], file: Path | None, debug: bool):
    """Report events whose start is after their end."""
    config = load_config()
    _setup_logging(debug, config.log_level)

    events = _load_or_exit(intervals, file)
    invalid = find_invalid_intervals(events)

    if not invalid:
        days = sum(e.length for e in events)
        click.echo(f"All {len(events)} events are valid ({days} event-days).")
        return

    for index, event in invalid:
        click.echo(f"#{index}: {event.format()} starts after it ends", err=True)
    sys.exit(1)
