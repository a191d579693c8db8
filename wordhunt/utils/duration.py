"""Parsing, clamping and formatting of countdown durations."""

from __future__ import annotations

import re
from typing import NamedTuple

from ..core.constants import (DEFAULT_DURATION_SECONDS, MAX_DURATION_SECONDS,
                              MIN_DURATION_SECONDS)

LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class Duration(NamedTuple):
    minutes: int
    seconds: int


def duration_to_seconds(minutes: int, seconds: int) -> int:
    return minutes * 60 + seconds


def seconds_to_duration(total_seconds: int) -> Duration:
    minutes, seconds = divmod(total_seconds, 60)
    return Duration(minutes, seconds)


def validate_duration(minutes: int, seconds: int) -> int:
    """Return the total in seconds, clamped to the supported range."""

    total = duration_to_seconds(minutes, seconds)
    return max(MIN_DURATION_SECONDS, min(MAX_DURATION_SECONDS, total))


def parse_numeric_input(value: str) -> int:
    """Parse the leading integer of a form field ("12abc" -> 12, "3.5" -> 3).

    Anything without a leading integer, or negative, becomes 0.
    """

    match = LEADING_INT_RE.match(value or "")
    if match is None:
        return 0
    parsed = int(match.group(1))
    return parsed if parsed >= 0 else 0


def default_duration() -> int:
    return DEFAULT_DURATION_SECONDS


def format_time(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"
