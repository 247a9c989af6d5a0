"""Process uptime: start instant captured once, elapsed time formatted as a duration string."""

import time
from datetime import datetime, timezone
from typing import Callable

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _with_fraction(whole: int, rem: int, digits: int) -> str:
    if not rem:
        return str(whole)
    frac = f"{rem:0{digits}d}".rstrip("0")
    return f"{whole}.{frac}"


def format_duration(ns: int) -> str:
    """Render a nanosecond duration as e.g. "0s", "1.5ms", "42.000001s", "2m3.5s", "1h0m0s".

    Below one second a single unit (ns, µs, ms) is used; otherwise hours, minutes and
    seconds, with hours only when non-zero and minutes when hours or minutes are non-zero.
    """
    negative = ns < 0
    u = -ns if negative else ns
    if u == 0:
        return "0s"
    if u < _NS_PER_US:
        out = f"{u}ns"
    elif u < _NS_PER_MS:
        out = _with_fraction(*divmod(u, _NS_PER_US), 3) + "µs"
    elif u < _NS_PER_S:
        out = _with_fraction(*divmod(u, _NS_PER_MS), 6) + "ms"
    else:
        secs, frac = divmod(u, _NS_PER_S)
        hours, rem = divmod(secs, 3600)
        minutes, seconds = divmod(rem, 60)
        out = _with_fraction(seconds, frac, 9) + "s"
        if hours or minutes:
            out = f"{minutes}m" + out
        if hours:
            out = f"{hours}h" + out
    return "-" + out if negative else out


class Uptime:
    """Write-once start instant. Safe to share across request threads (read-only after init)."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns):
        self._clock = clock
        self._started_ns = clock()
        self._started_at = datetime.now(timezone.utc)

    @property
    def started_at(self) -> datetime:
        return self._started_at

    def elapsed_ns(self) -> int:
        return self._clock() - self._started_ns

    def format(self) -> str:
        return format_duration(self.elapsed_ns())
