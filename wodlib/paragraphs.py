"""Split text into paragraphs separated by runs of blank lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Union

from .lines import newlines


def split_paragraphs(s: str) -> Iterator[str]:
    """Yield the paragraphs of ``s``.

    Each paragraph ends with two or more consecutive newline sequences (LF,
    CR LF or CR).  A single newline sequence at the start of a paragraph is a
    paragraph by itself.  Trailing and embedded newline sequences are kept,
    so joining the paragraphs gives back ``s``.
    """
    para_start = 0
    run: tuple[int, int, int] | None = None  # (start, end, newline count)

    def ends_paragraph(r: tuple[int, int, int]) -> bool:
        run_start, _, count = r
        return count > 1 or run_start == para_start

    for start, end in newlines(s):
        if run is not None and run[1] == start:
            run = (run[0], end, run[2] + 1)
            continue
        if run is not None and ends_paragraph(run):
            yield s[para_start:run[1]]
            para_start = run[1]
        run = (start, end, 1)
    if run is not None and ends_paragraph(run):
        yield s[para_start:run[1]]
        para_start = run[1]
    if para_start < len(s):
        yield s[para_start:]


Line = Union[str, bytes]


def read_paragraphs(fp: Iterable[Line]) -> Iterator[str]:
    """Yield the paragraphs read from ``fp``, an iterable of lines.

    A paragraph ends with one or more blank lines (``"\\n"`` or
    ``"\\r\\n"``); line terminators are kept.  Byte lines are decoded as
    UTF-8, one at a time.  If reading fails right after a blank line, the
    finished paragraph is yielded before the error is raised; if it fails in
    the middle of a paragraph, that paragraph is discarded.
    """
    buffer: list[str] = []
    last_line_was_blank = False
    lines = iter(fp)
    while True:
        try:
            raw = next(lines)
            line = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        except StopIteration:
            break
        except Exception:
            if last_line_was_blank:
                yield "".join(buffer)
            raise
        is_blank = line in ("\n", "\r\n")
        if last_line_was_blank and not is_blank:
            yield "".join(buffer)
            buffer = []
        buffer.append(line)
        last_line_was_blank = is_blank
    if buffer:
        yield "".join(buffer)