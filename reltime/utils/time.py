from __future__ import annotations

import time
from collections.abc import Callable

# Durations in milliseconds
MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE
MS_PER_DAY = 24 * MS_PER_HOUR
MS_PER_WEEK = 7 * MS_PER_DAY
# Four weeks; the upper edge of the weeks bucket
MS_PER_FOUR_WEEKS = 4 * MS_PER_WEEK
# Average month used for rounding month counts
MS_PER_MONTH = 2_628_003_000
MS_PER_YEAR = 365 * MS_PER_DAY

# Returns the current time in epoch milliseconds
Clock = Callable[[], int]


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000
