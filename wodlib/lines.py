"""Line-oriented string helpers that treat LF, CR LF and lone CR as newlines."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

_NEWLINE = re.compile(r"\r\n|\r|\n")
_CR_NEWLINE = re.compile(r"\r\n?")


def chomp(s: str) -> str:
    """Remove at most one trailing LF, CR LF or CR from ``s``."""
    return s.removesuffix("\n").removesuffix("\r")


def unlines(lines: Iterable[str]) -> str:
    """Concatenate ``lines``, putting a linefeed after each one."""
    return "".join(f"{line}\n" for line in lines)


def newlines(s: str) -> Iterator[tuple[int, int]]:
    """Yield the ``(start, end)`` indices of every newline sequence in ``s``.

    A newline sequence is LF, CR LF or a lone CR.
    """
    for match in _NEWLINE.finditer(s):
        yield match.span()


def lines_keepends(s: str) -> Iterator[str]:
    """Yield the lines of ``s`` with their terminating newline sequences kept.

    A lone CR also ends a line.  The final line need not be terminated.
    """
    pos = 0
    for _, end in newlines(s):
        yield s[pos:end]
        pos = end
    if pos < len(s):
        yield s[pos:]


def normalize_newlines(s: str) -> str:
    """Convert every CR LF and lone CR in ``s`` to LF."""
    return _CR_NEWLINE.sub("\n", s)


def string_lines(content: str) -> Iterator[str]:
    """Yield the lines of ``content`` without their newline sequences.

    A lone CR also ends a line.  No empty line is yielded after a final
    newline sequence.
    """
    pos = 0
    for start, end in newlines(content):
        yield content[pos:start]
        pos = end
    if pos < len(content):
        yield content[pos:]