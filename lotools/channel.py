"""Thread-safe channels with dispatching, buffering and fan-in/fan-out helpers."""

from __future__ import annotations

import random
import threading
import time
from collections import deque
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any, Generic, TypeVar

from .find import max_by, min_by

T = TypeVar("T")

DispatchingStrategy = Callable[[Any, int, Sequence["Channel[Any]"]], int]

_POLL_INTERVAL = 0.001
_BACKOFF = 0.00001


class ChannelClosedError(Exception):
    """Raised when sending on a closed channel or receiving from a closed, drained one."""


class _Cancelled(Exception):
    """Internal signal that a receive was abandoned because of cancellation."""


class Channel(Generic[T]):
    """A FIFO channel shared between threads.

    With a positive ``capacity`` senders block while the buffer is full. With
    a capacity of 0 the channel is unbuffered: a send blocks until the item
    has been received. Iterating yields items until the channel is closed and
    drained.
    """

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._queue: deque[T] = deque()
        self._cond = threading.Condition()
        self._closed = False
        self._sent = 0
        self._received = 0

    @property
    def capacity(self) -> int:
        """The buffer capacity; 0 for an unbuffered channel."""
        return self._capacity

    @property
    def closed(self) -> bool:
        """Whether :meth:`close` has been called."""
        with self._cond:
            return self._closed

    def __len__(self) -> int:
        """Number of buffered items; always 0 for an unbuffered channel."""
        if self._capacity == 0:
            return 0
        with self._cond:
            return len(self._queue)

    def is_full(self) -> bool:
        """Whether a buffered channel has no room left (never for unbuffered ones)."""
        return self._capacity != 0 and len(self) >= self._capacity

    def send(self, item: T) -> None:
        """Put ``item`` on the channel, blocking as the channel's capacity requires."""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("send on closed channel")
            if self._capacity > 0:
                while len(self._queue) >= self._capacity and not self._closed:
                    self._cond.wait()
                if self._closed:
                    raise ChannelClosedError("send on closed channel")
                self._queue.append(item)
                self._sent += 1
                self._cond.notify_all()
                return
            self._queue.append(item)
            self._sent += 1
            ticket = self._sent
            self._cond.notify_all()
            while self._received < ticket:
                self._cond.wait()

    def receive(self) -> T:
        """Take the next item, blocking until one is available.

        Raises ChannelClosedError once the channel is closed and empty.
        """
        return self._receive()

    def _receive(
        self,
        timeout: float | None = None,
        cancelled: Callable[[], bool] | None = None,
    ) -> T:
        deadline = None if timeout is None else time.monotonic() + timeout
        with self._cond:
            while True:
                if cancelled is not None and cancelled():
                    raise _Cancelled
                if self._queue:
                    item = self._queue.popleft()
                    self._received += 1
                    self._cond.notify_all()
                    return item
                if self._closed:
                    raise ChannelClosedError("receive on closed channel")
                wait: float | None = None
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        raise TimeoutError("receive timed out")
                    wait = remaining
                if cancelled is not None:
                    wait = _POLL_INTERVAL if wait is None else min(wait, _POLL_INTERVAL)
                self._cond.wait(wait)

    def close(self) -> None:
        """Close the channel; buffered items can still be received."""
        with self._cond:
            if self._closed:
                raise ChannelClosedError("close of closed channel")
            self._closed = True
            self._cond.notify_all()

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.receive()
            except ChannelClosedError:
                return


def _start(target: Callable[[], None]) -> None:
    threading.Thread(target=target, daemon=True).start()


def _create_channels(count: int, capacity: int) -> list[Channel[Any]]:
    return [Channel(capacity) for _ in range(count)]


def _close_all(channels: Iterable[Channel[Any]]) -> None:
    for channel in channels:
        channel.close()


def _not_full(channel: Channel[Any]) -> bool:
    return not channel.is_full()


def channel_dispatcher(
    stream: Iterable[T],
    count: int,
    channel_buffer_cap: int,
    strategy: DispatchingStrategy,
) -> list[Channel[T]]:
    """Distribute the items of ``stream`` over ``count`` new channels.

    ``strategy(msg, index, channels)`` picks the destination. The children are
    closed once the stream ends.
    """
    children = _create_channels(count, channel_buffer_cap)

    def run() -> None:
        try:
            for index, msg in enumerate(stream):
                destination = strategy(msg, index, children) % count
                children[destination].send(msg)
        finally:
            _close_all(children)

    _start(run)
    return children


def dispatching_strategy_round_robin(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick channels in turn, skipping those that are full."""
    while True:
        i = index % len(channels)
        if _not_full(channels[i]):
            return i
        index += 1
        time.sleep(_BACKOFF)


def dispatching_strategy_random(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick a random channel that is not full."""
    while True:
        i = random.randrange(len(channels))
        if _not_full(channels[i]):
            return i
        time.sleep(_BACKOFF)


def dispatching_strategy_weighted_random(weights: Sequence[int]) -> DispatchingStrategy:
    """Return a strategy picking channel ``i`` with probability proportional to ``weights[i]``."""
    seq = [i for i, weight in enumerate(weights) for _ in range(weight)]

    def strategy(msg: Any, index: int, channels: Sequence[Channel[Any]]) -> int:
        while True:
            i = random.choice(seq)
            if _not_full(channels[i]):
                return i
            time.sleep(_BACKOFF)

    return strategy


def dispatching_strategy_first(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the first channel that is not full."""
    while True:
        for i, channel in enumerate(channels):
            if _not_full(channel):
                return i
        time.sleep(_BACKOFF)


def dispatching_strategy_least(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the emptiest channel."""
    return min_by(
        range(len(channels)),
        lambda item, current: len(channels[item]) < len(channels[current]),
    )


def dispatching_strategy_most(
    msg: Any, index: int, channels: Sequence[Channel[Any]]
) -> int:
    """Pick the fullest channel that still has room."""
    return max_by(
        range(len(channels)),
        lambda item, current: len(channels[item]) > len(channels[current])
        and _not_full(channels[item]),
    )


def slice_to_channel(buffer_size: int, collection: Iterable[T]) -> Channel[T]:
    """Return a channel that yields the items of ``collection`` and then closes."""
    ch: Channel[T] = Channel(buffer_size)
    items = list(collection)

    def run() -> None:
        try:
            for item in items:
                ch.send(item)
        finally:
            ch.close()

    _start(run)
    return ch


def channel_to_slice(ch: Iterable[T]) -> list[T]:
    """Collect every item of ``ch``; blocks until the channel closes."""
    return list(ch)


def generator(buffer_size: int, producer: Callable[[Callable[[T], None]], Any]) -> Channel[T]:
    """Run ``producer(emit)`` in a thread; emitted items go to the returned channel."""
    ch: Channel[T] = Channel(buffer_size)

    def run() -> None:
        try:
            producer(ch.send)
        finally:
            ch.close()

    _start(run)
    return ch


def _buffer_until(
    ch: Channel[T], size: int, cancelled: Callable[[], bool] | None
) -> tuple[list[T], int, float, bool]:
    start = time.monotonic()
    items: list[T] = []
    while len(items) < size:
        try:
            items.append(ch._receive(cancelled=cancelled))
        except ChannelClosedError:
            return items, len(items), time.monotonic() - start, False
        except _Cancelled:
            break
    return items, len(items), time.monotonic() - start, True


def buffer(ch: Channel[T], size: int) -> tuple[list[T], int, float, bool]:
    """Read up to ``size`` items.

    Returns ``(items, length, elapsed_seconds, ok)``; ``ok`` is False when the
    channel closed before ``size`` items were read.
    """
    return _buffer_until(ch, size, None)


def buffer_with_context(
    ctx: threading.Event, ch: Channel[T], size: int
) -> tuple[list[T], int, float, bool]:
    """Like :func:`buffer`, stopping early with ``ok`` True once ``ctx`` is set."""
    return _buffer_until(ch, size, ctx.is_set)


def buffer_with_timeout(
    ch: Channel[T], size: int, timeout: float
) -> tuple[list[T], int, float, bool]:
    """Like :func:`buffer`, stopping early with ``ok`` True after ``timeout`` seconds."""
    deadline = time.monotonic() + timeout
    return _buffer_until(ch, size, lambda: time.monotonic() >= deadline)


def fan_in(channel_buffer_cap: int, *args: Iterable[T]) -> Channel[T]:
    """Merge the given channels into one, closed when all of them are exhausted."""
    out: Channel[T] = Channel(channel_buffer_cap)
    remaining = len(args)
    lock = threading.Lock()

    if remaining == 0:
        out.close()
        return out

    def forward(upstream: Iterable[T]) -> None:
        nonlocal remaining
        try:
            for item in upstream:
                out.send(item)
        finally:
            with lock:
                remaining -= 1
                last = remaining == 0
            if last:
                out.close()

    for upstream in args:
        _start(lambda upstream=upstream: forward(upstream))
    return out


def fan_out(count: int, channels_buffer_cap: int, upstream: Iterable[T]) -> list[Channel[T]]:
    """Broadcast every item of ``upstream`` to ``count`` new channels."""
    downstreams = _create_channels(count, channels_buffer_cap)

    def run() -> None:
        try:
            for msg in upstream:
                for downstream in downstreams:
                    downstream.send(msg)
        finally:
            _close_all(downstreams)

    _start(run)
    return downstreams