"""Relative times (durations) expressed as seconds plus nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass

INT64_MAX = 2**63 - 1
_UINT64_LIMIT = 2**64
_NS_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class RmwTime:
    """A duration with no origin; both components are unsigned 64-bit values."""

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        for name in ("sec", "nsec"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value < _UINT64_LIMIT:
                raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value!r}")


DURATION_INFINITE = RmwTime(9223372036, 854775807)
DURATION_UNSPECIFIED = RmwTime(0, 0)


def time_total_nsec(time: RmwTime) -> int:
    """Return the total nanoseconds of ``time``, clamped to INT64_MAX."""
    return min(time.sec * _NS_PER_SEC + time.nsec, INT64_MAX)


def time_equal(left: RmwTime, right: RmwTime) -> bool:
    """Return whether two times stand for the same duration, normalized or not."""
    return time_total_nsec(left) == time_total_nsec(right)


def time_from_nsec(nanoseconds: int) -> RmwTime:
    """Build a time from total nanoseconds; negative input gives an infinite duration."""
    if nanoseconds < 0:
        return DURATION_INFINITE
    sec, nsec = divmod(nanoseconds, _NS_PER_SEC)
    return RmwTime(sec, nsec)


def time_normalize(time: RmwTime) -> RmwTime:
    """Return an equal time whose nanoseconds are below one second."""
    extra_sec, nsec = divmod(time.nsec, _NS_PER_SEC)
    return RmwTime(time.sec + extra_sec, nsec)