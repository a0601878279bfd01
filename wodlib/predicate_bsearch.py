"""Binary search for the boundary where a monotonic predicate flips."""

from __future__ import annotations

from collections.abc import Callable


def _check_range(rng: range) -> None:
    if rng.step != 1:
        raise ValueError(f"range must have step 1, got {rng.step}")


def first_in_range(rng: range, predicate: Callable[[int], bool]) -> int | None:
    """Find the first ``x`` in ``rng`` for which ``predicate`` holds.

    ``predicate`` must be false for every element before ``x`` and true for
    every element from ``x`` on.  Returns ``None`` if no such ``x`` is found.
    """
    _check_range(rng)
    low, high = rng.start, rng.stop - 1
    while low <= high:
        mid = low + (high - low) // 2
        if predicate(mid):
            prev = mid - 1
            if prev >= 0 and prev >= rng.start and predicate(prev):
                high = mid - 1
            else:
                return mid
        else:
            low = mid + 1
    return None


def last_in_range(rng: range, predicate: Callable[[int], bool]) -> int | None:
    """Find the last ``x`` in ``rng`` for which ``predicate`` holds.

    ``predicate`` must be true for every element up to ``x`` and false for
    every element after it.  Returns ``None`` if no such ``x`` is found.
    """
    _check_range(rng)
    low, high = rng.start, rng.stop - 1
    while low <= high:
        mid = low + (high - low) // 2
        if predicate(mid):
            nxt = mid + 1
            if nxt < rng.stop and predicate(nxt):
                low = nxt + 1
            else:
                return mid
        else:
            high = mid - 1
    return None