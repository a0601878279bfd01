"""Small helpers for splitting, comparing and pluralising strings."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass


def partition(s: str, separators: str | Iterable[str]) -> tuple[str, str, str] | None:
    """Split ``s`` around the first occurrence of a separator.

    ``separators`` is either a single string or an iterable of alternative
    strings; the earliest match in ``s`` wins, with ties going to the
    alternative listed first.  Returns ``(before, match, after)``, or
    ``None`` if no separator occurs in ``s``.
    """
    candidates = [separators] if isinstance(separators, str) else list(separators)
    best: tuple[int, str] | None = None
    for sep in candidates:
        index = s.find(sep)
        if index != -1 and (best is None or index < best[0]):
            best = (index, sep)
    if best is None:
        return None
    index, sep = best
    return s[:index], sep, s[index + len(sep):]


@dataclass(frozen=True)
class Quantify:
    """A count and a noun, rendered as ``"{qty} {word}{ending}"``."""

    qty: int
    word: str
    ending: str = ""

    def __str__(self) -> str:
        return f"{self.qty} {self.word}{self.ending}"


def quantify(qty: int, word: str) -> Quantify:
    """Pair ``qty`` with ``word``, adding an "s" unless ``qty`` is 1."""
    return Quantify(qty, word, "" if qty == 1 else "s")


def quantify_irreg(qty: int, singular: str, plural: str) -> Quantify:
    """Pair ``qty`` with ``singular`` if ``qty`` is 1, otherwise with ``plural``."""
    return Quantify(qty, singular if qty == 1 else plural)


def _leading_length(s: str, predicate: Callable[[str], bool]) -> int:
    for index, ch in enumerate(s):
        if not predicate(ch):
            return index
    return len(s)


def _trailing_start(s: str, predicate: Callable[[str], bool]) -> int:
    boundary = len(s)
    for ch in reversed(s):
        if not predicate(ch):
            break
        boundary -= 1
    return boundary


def span(s: str, predicate: Callable[[str], bool]) -> tuple[str, str]:
    """Split ``s`` before the first character that fails ``predicate``."""
    boundary = _leading_length(s, predicate)
    return s[:boundary], s[boundary:]


def span_some(s: str, predicate: Callable[[str], bool]) -> tuple[str, str] | None:
    """Like :func:`span`, but return ``None`` if the leading part is empty."""
    boundary = _leading_length(s, predicate)
    if boundary == 0:
        return None
    return s[:boundary], s[boundary:]


def rspan(s: str, predicate: Callable[[str], bool]) -> tuple[str, str]:
    """Split ``s`` after the last character, counting from the end, that fails ``predicate``.

    The second part is the longest suffix whose characters all satisfy
    ``predicate``.
    """
    boundary = _trailing_start(s, predicate)
    return s[:boundary], s[boundary:]


def rspan_some(s: str, predicate: Callable[[str], bool]) -> tuple[str, str] | None:
    """Like :func:`rspan`, but return ``None`` if the trailing part is empty."""
    boundary = _trailing_start(s, predicate)
    if boundary == len(s):
        return None
    return s[:boundary], s[boundary:]


def starts_with_ignore_ascii_case(s: str, prefix: str) -> bool:
    """Return whether ``s`` starts with ``prefix``, ignoring ASCII case only."""
    raw_prefix = prefix.encode("utf-8")
    raw_head = s.encode("utf-8")[: len(raw_prefix)]
    return len(raw_head) == len(raw_prefix) and raw_head.lower() == raw_prefix.lower()


def trim_string(s: str) -> str:
    """Return ``s`` with all leading and trailing whitespace removed."""
    return s.strip()