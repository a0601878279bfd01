"""Async stream helpers: bounded concurrent tasks, channel-fed streams, dedup."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, AsyncIterator, Awaitable, Callable, Iterable
from typing import Any, Generic, Hashable, TypeVar

T = TypeVar("T")
H = TypeVar("H", bound=Hashable)

_WAKE = object()


class BufferedTasks(Generic[T]):
    """Run awaitables as tasks, at most ``limit`` at a time, yielding results as they finish.

    Tasks run on the event loop continuously, not only while the stream is
    being iterated.  Iteration ends once :meth:`close` has been called and
    every spawned task's result has been yielded.  If a task raises, the
    exception propagates out of the iteration.
    """

    def __init__(self, limit: int) -> None:
        self._semaphore = asyncio.Semaphore(limit)
        self._tasks: set[asyncio.Task[T]] = set()
        self._done: asyncio.Queue[Any] = asyncio.Queue()
        self._outstanding = 0
        self._closed = False

    @classmethod
    def from_iter(cls, limit: int, iterable: Iterable[Awaitable[T]]) -> BufferedTasks[T]:
        """Spawn every awaitable in ``iterable`` and close; needs a running loop."""
        buffered: BufferedTasks[T] = cls(limit)
        for coro in iterable:
            buffered.spawn(coro)
        buffered.close()
        return buffered

    @classmethod
    async def from_stream(
        cls, limit: int, stream: AsyncIterable[Awaitable[T]]
    ) -> BufferedTasks[T]:
        """Spawn every awaitable produced by ``stream`` and close."""
        buffered: BufferedTasks[T] = cls(limit)
        async for coro in stream:
            buffered.spawn(coro)
        buffered.close()
        return buffered

    async def _run(self, coro: Awaitable[T]) -> T:
        async with self._semaphore:
            return await coro

    def _finished(self, task: asyncio.Task[T]) -> None:
        self._tasks.discard(task)
        self._done.put_nowait(task)

    def spawn(self, coro: Awaitable[T]) -> None:
        """Start running ``coro`` as soon as a concurrency slot is free."""
        task = asyncio.ensure_future(self._run(coro))
        self._tasks.add(task)
        self._outstanding += 1
        task.add_done_callback(self._finished)

    def close(self) -> None:
        """Declare that no more tasks will be spawned."""
        self._closed = True
        self._done.put_nowait(_WAKE)

    def __aiter__(self) -> AsyncIterator[T]:
        return self

    async def __anext__(self) -> T:
        while True:
            if self._outstanding == 0 and self._closed:
                raise StopAsyncIteration
            item = await self._done.get()
            if item is _WAKE:
                continue
            self._outstanding -= 1
            return item.result()


class _BoundedSender(Generic[T]):
    """Sending half of a bounded channel feeding a received stream."""

    def __init__(self, queue: asyncio.Queue[T]) -> None:
        self._queue = queue
        self._closed = False

    async def send(self, value: T) -> None:
        """Send ``value``, waiting while the buffer is full."""
        if self._closed:
            raise RuntimeError("receiving stream is closed")
        await self._queue.put(value)


class _UnboundedSender(Generic[T]):
    """Sending half of an unbounded channel feeding a received stream."""

    def __init__(self, queue: asyncio.Queue[T]) -> None:
        self._queue = queue
        self._closed = False

    def send(self, value: T) -> None:
        """Send ``value`` without waiting."""
        if self._closed:
            raise RuntimeError("receiving stream is closed")
        self._queue.put_nowait(value)


async def _drive(
    queue: asyncio.Queue[T],
    sender: _BoundedSender[T] | _UnboundedSender[T],
    func: Callable[[Any], Awaitable[None]],
) -> AsyncIterator[T]:
    task = asyncio.ensure_future(func(sender))
    getter: asyncio.Future[T] | None = None
    try:
        while True:
            getter = asyncio.ensure_future(queue.get())
            done, _ = await asyncio.wait({getter, task}, return_when=asyncio.FIRST_COMPLETED)
            if getter in done:
                value = getter.result()
                getter = None
                yield value
                continue
            getter.cancel()
            getter = None
            task.result()
            while not queue.empty():
                yield queue.get_nowait()
            return
    finally:
        sender._closed = True
        if getter is not None:
            getter.cancel()
        if not task.done():
            task.cancel()
            await asyncio.wait({task})
        if not task.cancelled():
            task.exception()


def received_stream(
    buffer: int, func: Callable[[_BoundedSender[T]], Awaitable[None]]
) -> AsyncIterator[T]:
    """Run ``func(sender)`` to completion, yielding every value it sends.

    ``sender.send`` is a coroutine that waits while ``buffer`` values are
    pending.  The procedure starts on first iteration; closing the stream
    early cancels it.
    """
    if buffer < 1:
        raise ValueError("buffer must be at least 1")
    queue: asyncio.Queue[T] = asyncio.Queue(maxsize=buffer)
    return _drive(queue, _BoundedSender(queue), func)


def unbounded_received_stream(
    func: Callable[[_UnboundedSender[T]], Awaitable[None]]
) -> AsyncIterator[T]:
    """Like :func:`received_stream`, but ``sender.send`` is a plain call that never waits."""
    queue: asyncio.Queue[T] = asyncio.Queue()
    return _drive(queue, _UnboundedSender(queue), func)


async def unique(stream: AsyncIterable[H]) -> AsyncIterator[H]:
    """Yield the items of ``stream``, skipping any already seen."""
    seen: set[H] = set()
    async for value in stream:
        if value not in seen:
            seen.add(value)
            yield value