# wodlib

Small helpers for everyday Python code: text and line handling, paragraph
splitting, integer arithmetic, predicate-based binary search, subprocess
wrappers and asyncio stream utilities. It has no runtime dependencies.

## Installation

```
pip install wodlib
```

To run the test suite, install the `test` extra (`pip install "wodlib[test]"`)
and run `pytest`.

## Modules

### `wodlib.strings`

- `partition(s, separators)`: split `s` around the earliest occurrence of a
  separator. `separators` is one string or an iterable of alternative
  strings (ties go to the one listed first). Returns `(before, match, after)`
  or `None`.
- `span(s, predicate)` / `rspan(s, predicate)`: split off the longest
  leading (or trailing) run of characters that satisfy `predicate`.
- `span_some` / `rspan_some`: the same, but return `None` when that run is
  empty.
- `starts_with_ignore_ascii_case(s, prefix)`: prefix test that ignores ASCII
  case differences only.
- `trim_string(s)`: strip leading and trailing whitespace.
- `quantify(qty, word)` / `quantify_irreg(qty, singular, plural)`: return a
  frozen `Quantify` whose string form is, e.g., `"3 apples"` or `"1 mouse"`.

```python
from wodlib.strings import partition, quantify, span

str(quantify(42, "apple"))                 # '42 apples'
span("123abc", str.isdigit)                # ('123', 'abc')
partition("abc.123-xyz", ["-", "."])       # ('abc', '.', '123-xyz')
```

### `wodlib.lines`

Newline handling that treats LF, CR LF and a lone CR alike:

- `chomp(s)`: remove at most one trailing newline sequence.
- `unlines(lines)`: join lines, putting a LF after each one.
- `newlines(s)`: yield `(start, end)` offsets of each newline sequence.
- `lines_keepends(s)`: yield lines with their terminators kept.
- `normalize_newlines(s)`: turn every CR LF and lone CR into LF.
- `string_lines(content)`: yield lines without their terminators.

```python
from wodlib.lines import chomp, normalize_newlines

chomp("foo\r\n")                           # 'foo'
normalize_newlines("a\rb\r\nc")            # 'a\nb\nc'
```

### `wodlib.paragraphs`

- `split_paragraphs(s)`: yield the paragraphs of `s`. Each ends with two or
  more consecutive newline sequences; a single newline sequence at the start
  of a paragraph is a paragraph by itself. All newlines are kept, so the
  pieces join back into `s`.
- `read_paragraphs(fp)`: yield paragraphs from an iterable of lines, such as
  an open file. A paragraph ends with one or more blank lines (`"\n"` or
  `"\r\n"`). Byte lines are decoded as UTF-8. If reading fails right after a
  blank line, the finished paragraph is yielded before the error is raised;
  a paragraph in progress when reading fails is discarded.

### `wodlib.arith`

- `truncated_divmod(dividend, divisor)`: quotient rounded toward zero and a
  remainder with the sign of `dividend`.
- `gcd(a, b)` / `lcm(a, b)`: for nonnegative integers; raise `ValueError`
  for negative arguments.
- `gcd_signed(a, b)` / `lcm_signed(a, b)`: for any integers; the result is
  never negative.
- `modinverse(a, n)`: the smallest positive inverse of `a` modulo `n`, or
  `None` if there is none or `abs(n) < 2`.

### `wodlib.cmp_range`

`cmp_range(value, lower, upper)` returns a `RangeOrdering` (`LESS`,
`EQ_LOWER`, `BETWEEN`, `EQ_BOTH`, `EQ_UPPER`, `GREATER`). It raises
`ValueError` if `lower > upper`.

### `wodlib.cross_upto`

`cross_upto(a, b)` returns a `CrossUpto` iterator over every pair `(x, y)`
with `0 <= x < a` and `0 <= y < b`, in row-major order; `len()` gives the
number of pairs left.

### `wodlib.predicate_bsearch`

`first_in_range(rng, predicate)` / `last_in_range(rng, predicate)` binary
search a step-1 `range` for the first element where a monotone predicate
turns true (or the last where it is still true), returning `None` if there
is none.

### `wodlib.show_duration`

`show_duration_as_seconds(seconds, nanos=0)` formats a duration as seconds
with only as many decimal places as needed, e.g. `"10.123456789"` or `"42"`.

### `wodlib.commands`

- `runcmd(arg0, args=())`: run a program.
- `readcmd(arg0, args=())`: run a program and return its stdout, decoded as
  UTF-8 and trimmed.
- `readcmd_lossy(arg0, args=())`: like `readcmd`, replacing invalid UTF-8
  with U+FFFD.

Failures raise `CommandStartupError`, `CommandExitError` (with
`returncode`) or `CommandDecodeError`, all subclasses of `CommandError`.

`LoggedCommand(arg0)` builds a command with chainable `arg`, `args` and
`current_dir`, exposes the shell-quoted `cmdline`, logs it at debug level
when run, and offers `status()` and `check_output()`.

### `wodlib.streams`

asyncio helpers:

- `BufferedTasks(limit)`: run awaitables as tasks, at most `limit` at a time,
  and iterate over their results as they finish. Add work with `spawn`, then
  call `close`; `from_iter` and `from_stream` do both. A task's exception
  propagates out of the iteration.
- `received_stream(buffer, func)`: call `func(sender)` and iterate over the
  values it passes to `await sender.send(value)`, which waits while `buffer`
  values are pending. Closing the stream early cancels the producer.
- `unbounded_received_stream(func)`: the same, but `sender.send(value)` is a
  plain call that never waits.
- `unique(stream)`: yield the items of an async iterable, skipping repeats.

```python
import asyncio
from wodlib.streams import received_stream

async def produce(sender):
    for n in range(3):
        await sender.send(n)

async def main():
    return [n async for n in received_stream(2, produce)]

asyncio.run(main())                        # [0, 1, 2]
```