"""Wall-clock utilities."""

import time


def now_nanos() -> int:
    """Return wall-clock time as integer epoch nanoseconds."""
    return time.time_ns()
