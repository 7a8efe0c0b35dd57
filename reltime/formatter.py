from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .utils.time import (
    MS_PER_DAY,
    MS_PER_FOUR_WEEKS,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_MONTH,
    MS_PER_SECOND,
    MS_PER_WEEK,
    MS_PER_YEAR,
    Clock,
    now_ms,
)

logger = logging.getLogger(__name__)

JUST_NOW_TEXT = "Just now"
AGO_SUFFIX = " ago"


@dataclass(frozen=True)
class RelativeTime:
    """Result of bucketing an elapsed duration.

    Attributes:
        count: Number of units, or None for the "Just now" sentinel.
        unit: Display word for the unit, already abbreviated and pluralized.
    """

    count: int | None
    unit: str = ""

    @property
    def is_just_now(self) -> bool:
        return self.count is None

    def __str__(self) -> str:
        if self.is_just_now:
            return JUST_NOW_TEXT
        return f"{self.count} {self.unit}"


JUST_NOW = RelativeTime(count=None)


def _unit_text(count: int, unit: str) -> str:
    # Counts of 0 and 1 both take the singular word
    return f"{unit}s" if count > 1 else unit


def _counted(count: int, unit: str) -> RelativeTime:
    return RelativeTime(count, _unit_text(count, unit))


def count_seconds(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into whole seconds, truncating.

    Returns:
        `JUST_NOW` for up to one second, else "X seconds" / "X sec".
    """
    count = int(difference // MS_PER_SECOND)
    if count > 1:
        return RelativeTime(count, "sec" if abbreviate_unit else "seconds")
    return JUST_NOW


def count_minutes(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into whole minutes, truncating."""
    return _counted(int(difference // MS_PER_MINUTE), "min" if abbreviate_unit else "minute")


def count_hours(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into whole hours, truncating."""
    return _counted(int(difference // MS_PER_HOUR), "hr" if abbreviate_unit else "hour")


def count_days(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into whole days, truncating.

    Days have no abbreviated form.
    """
    return _counted(int(difference // MS_PER_DAY), "day")


def count_weeks(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into whole weeks, truncating.

    More than three weeks rolls over to "1 month".
    """
    count = int(difference // MS_PER_WEEK)
    if count > 3:
        return RelativeTime(1, "mth" if abbreviate_unit else "month")
    return _counted(count, "wk" if abbreviate_unit else "week")


def count_months(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into months, rounding to the nearest month.

    Halves round up, a count of zero is shown as one month, and more than
    twelve months rolls over to "1 year".
    """
    count = math.floor(difference / MS_PER_MONTH + 0.5)
    count = max(count, 1)
    if count > 12:
        return RelativeTime(1, "yr" if abbreviate_unit else "year")
    return _counted(count, "mth" if abbreviate_unit else "month")


def count_years(difference: int, abbreviate_unit: bool) -> RelativeTime:
    """Bucket a difference into whole 365-day years, truncating."""
    return _counted(int(difference // MS_PER_YEAR), "yr" if abbreviate_unit else "year")


def relative_time(elapsed_ms: int, abbreviate_unit: bool = False) -> RelativeTime:
    """Select the unit bucket for an elapsed duration and count it.

    Args:
        elapsed_ms: Milliseconds elapsed. Negative values are treated as zero.
        abbreviate_unit: Use short unit words ("min", "hr", ...).

    Returns:
        The bucketed `RelativeTime`.
    """
    if elapsed_ms < 0:
        logger.debug(f"Timestamp is {-elapsed_ms}ms in the future; treating as just now.")
        elapsed_ms = 0

    if elapsed_ms < MS_PER_MINUTE:
        return count_seconds(elapsed_ms, abbreviate_unit)
    if elapsed_ms < MS_PER_HOUR:
        return count_minutes(elapsed_ms, abbreviate_unit)
    if elapsed_ms < MS_PER_DAY:
        return count_hours(elapsed_ms, abbreviate_unit)
    if elapsed_ms < MS_PER_WEEK:
        return count_days(elapsed_ms, abbreviate_unit)
    if elapsed_ms < MS_PER_FOUR_WEEKS:
        return count_weeks(elapsed_ms, abbreviate_unit)
    if elapsed_ms < MS_PER_YEAR:
        return count_months(elapsed_ms, abbreviate_unit)
    return count_years(elapsed_ms, abbreviate_unit)


def format_elapsed(elapsed_ms: int, abbreviate_unit: bool = False) -> str:
    """Convert an elapsed duration to a human-readable time-ago string.

    Args:
        elapsed_ms: Milliseconds elapsed.
        abbreviate_unit: Use short unit words.

    Returns:
        "Just now", or a string such as "5 minutes ago" / "5 min ago".
    """
    result = relative_time(elapsed_ms, abbreviate_unit)
    if result.is_just_now:
        return str(result)
    return f"{result}{AGO_SUFFIX}"


def format_time(timestamp_ms: int, abbreviate_unit: bool = False, clock: Clock | None = None) -> str:
    """Format a UNIX millisecond timestamp as a time-ago string.

    Progresses from the smallest unit (seconds) to the largest (years).

    Args:
        timestamp_ms: Milliseconds since the epoch, expected to be in the past.
        abbreviate_unit: Use short unit words ("sec", "min", "hr", "wk", "mth", "yr").
        clock: Callable returning the current epoch milliseconds. Defaults to
            the wall clock.

    Returns:
        Human-readable string (e.g., "3 hours ago", "Just now").
    """
    now = (clock or now_ms)()
    return format_elapsed(now - timestamp_ms, abbreviate_unit)
