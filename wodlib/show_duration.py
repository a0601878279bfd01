"""Render durations as a minimal decimal number of seconds."""

from __future__ import annotations

_NANOS_PER_SEC = 1_000_000_000


def show_duration_as_seconds(seconds: int, nanos: int = 0) -> str:
    """Format a duration as seconds, with no more fractional digits than needed.

    ``nanos`` in excess of one second carries over into ``seconds``.
    """
    if seconds < 0 or nanos < 0:
        raise ValueError("duration must not be negative")
    extra, nanos = divmod(nanos, _NANOS_PER_SEC)
    seconds += extra
    if nanos == 0:
        return str(seconds)
    fraction = f"{nanos:09d}".rstrip("0")
    return f"{seconds}.{fraction}"