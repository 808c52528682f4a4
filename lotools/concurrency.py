"""Concurrency helpers: synchronised calls, background calls, polling and wait groups."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from concurrent.futures import Future
from typing import Any, TypeVar

from .errors import try_

T = TypeVar("T")


class Synchronizer:
    """Runs callbacks one at a time under a lock."""

    def __init__(self, lock: Any) -> None:
        self.lock = lock

    def do(self, callback: Callable[[], Any]) -> None:
        """Run ``callback`` while holding the lock; exceptions are swallowed."""
        with self.lock:
            try_(callback)


def synchronize(*args: Any) -> Synchronizer:
    """Return a :class:`Synchronizer` using the given lock or a new one."""
    if len(args) > 1:
        raise ValueError("unexpected arguments")
    lock = args[0] if args else threading.Lock()
    return Synchronizer(lock)


def run_async(f: Callable[[], T]) -> Future[T]:
    """Run ``f`` in a background thread and return a future for its result."""
    future: Future[T] = Future()
    future.set_running_or_notify_cancel()

    def runner() -> None:
        try:
            result = f()
        except BaseException as exc:  # noqa: BLE001 - delivered through the future
            future.set_exception(exc)
        else:
            future.set_result(result)

    threading.Thread(target=runner, daemon=True).start()
    return future


def wait_for(
    condition: Callable[[int], bool], timeout: float, heartbeat_delay: float
) -> tuple[int, float, bool]:
    """Poll ``condition(i)`` every ``heartbeat_delay`` seconds until it holds or time runs out.

    Returns ``(iterations, elapsed_seconds, found)``.
    """
    return wait_for_with_context(
        None, lambda _ctx, i: condition(i), timeout, heartbeat_delay
    )


def wait_for_with_context(
    ctx: threading.Event | None,
    condition: Callable[[threading.Event | None, int], bool],
    timeout: float,
    heartbeat_delay: float,
) -> tuple[int, float, bool]:
    """Like :func:`wait_for`, also stopping as soon as the ``ctx`` event is set.

    The condition receives ``ctx`` and the zero-based iteration number.
    """
    start = time.monotonic()
    iterations = 0

    def cancelled() -> bool:
        return ctx is not None and ctx.is_set()

    if cancelled():
        return iterations, time.monotonic() - start, False

    deadline = start + timeout
    next_tick = start + heartbeat_delay

    while True:
        wake = min(deadline, next_tick)
        remaining = wake - time.monotonic()
        if remaining > 0:
            if ctx is not None:
                if ctx.wait(remaining):
                    return iterations, time.monotonic() - start, False
            else:
                time.sleep(remaining)
        elif cancelled():
            return iterations, time.monotonic() - start, False

        if next_tick >= deadline:
            return iterations, time.monotonic() - start, False

        iterations += 1
        if condition(ctx, iterations - 1):
            return iterations, time.monotonic() - start, True

        next_tick = max(next_tick + heartbeat_delay, time.monotonic())


class WaitGroup:
    """Runs tasks in threads and collects the exceptions they raise."""

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []
        self._lock = threading.Lock()
        self._errors: list[BaseException] = []

    def go(self, f: Callable[[], Any]) -> None:
        """Run ``f()`` in a new thread."""
        self.go_with_context_error(None, lambda _ctx: f())

    def go_with_context(
        self, ctx: threading.Event | None, f: Callable[[threading.Event | None], Any]
    ) -> None:
        """Run ``f(ctx)`` in a new thread."""
        self.go_with_context_error(ctx, f)

    def go_with_error(self, f: Callable[[], Any]) -> None:
        """Run ``f()`` in a new thread; a returned exception is recorded too."""
        self.go_with_context_error(None, lambda _ctx: f())

    def go_with_context_error(
        self, ctx: threading.Event | None, f: Callable[[threading.Event | None], Any]
    ) -> None:
        """Run ``f(ctx)`` in a new thread, recording a raised or returned exception."""

        def runner() -> None:
            try:
                result = f(ctx)
            except Exception as exc:
                self._record(exc)
            else:
                if isinstance(result, BaseException):
                    self._record(result)

        thread = threading.Thread(target=runner, daemon=True)
        with self._lock:
            self._threads.append(thread)
        thread.start()

    def _record(self, error: BaseException) -> None:
        with self._lock:
            self._errors.append(error)

    def wait(self) -> list[BaseException]:
        """Wait for every started task and return the exceptions collected."""
        while True:
            with self._lock:
                pending = [t for t in self._threads if t.is_alive()]
            if not pending:
                break
            for thread in pending:
                thread.join()
        with self._lock:
            return list(self._errors)