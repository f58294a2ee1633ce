"""Relative time values split into seconds and nanoseconds."""

from __future__ import annotations

from dataclasses import dataclass

INT64_MAX = 2**63 - 1
UINT64_MAX = 2**64 - 1
NSEC_PER_SEC = 1_000_000_000


@dataclass(frozen=True)
class Duration:
    """A duration or relative time; it encodes no origin.

    Both components are unsigned 64-bit values. ``nsec`` may exceed one
    second; use :func:`time_equal` to compare values that may not be
    normalized.
    """

    sec: int = 0
    nsec: int = 0

    def __post_init__(self) -> None:
        for name in ("sec", "nsec"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an integer")
            if not 0 <= value <= UINT64_MAX:
                raise ValueError(f"{name} must fit in an unsigned 64-bit integer")


DURATION_INFINITE = Duration(9223372036, 854775807)
DURATION_UNSPECIFIED = Duration(0, 0)


def time_total_nsec(value: Duration) -> int:
    """Return the total nanoseconds of a duration, saturating at INT64_MAX."""
    max_sec = INT64_MAX // NSEC_PER_SEC
    if value.sec > max_sec:
        return INT64_MAX
    sec_as_nsec = value.sec * NSEC_PER_SEC
    if value.nsec > INT64_MAX - sec_as_nsec:
        return INT64_MAX
    return sec_as_nsec + value.nsec


def time_equal(left: Duration, right: Duration) -> bool:
    """Whether two durations represent the same time, normalized or not."""
    return time_total_nsec(left) == time_total_nsec(right)


def time_from_nsec(nanoseconds: int) -> Duration:
    """Build a duration from total nanoseconds.

    Negative input cannot be represented and yields the infinite duration.
    """
    if nanoseconds < 0:
        return DURATION_INFINITE
    sec, nsec = divmod(nanoseconds, NSEC_PER_SEC)
    return Duration(sec, nsec)


def time_normalize(value: Duration) -> Duration:
    """Carry whole seconds out of ``nsec`` so that it stays below one second."""
    carry, nsec = divmod(value.nsec, NSEC_PER_SEC)
    return Duration(min(value.sec + carry, UINT64_MAX), nsec)