"""Timer queue for deferred calls.

All calls scheduled through `delay` go to a single process-wide `TimerQueue`.
The queue keeps a heap of pending entries ordered by due time (ties broken by
scheduling order) and runs them, one at a time, on a daemon worker thread that
is started on first use. The process-wide queue is shut down at interpreter
exit, so calls still pending then run when they fall due (cancelled ones are
skipped).

Each scheduled call is represented by a `DelayHandle`, backed by a
`concurrent.futures.Future`, that can cancel the call before it starts and
retrieve its outcome once it has run.
"""

from __future__ import annotations

import atexit
import heapq
import itertools
import logging
import threading
import time
from collections.abc import Callable
from concurrent.futures import Future
from dataclasses import dataclass, field
from functools import partial
from typing import Any

from underbar import config
from underbar.errors import InvalidArgumentError, SchedulerShutdownError

logger = logging.getLogger(__name__)


def _describe(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def _check_wait(wait_ms: object) -> float:
    if isinstance(wait_ms, bool) or not isinstance(wait_ms, (int, float)):
        raise InvalidArgumentError(
            f"delay wait must be a number of milliseconds, got {type(wait_ms).__name__}"
        )
    if not wait_ms >= 0:
        raise InvalidArgumentError(f"delay wait must be non-negative, got {wait_ms}")
    return float(wait_ms)


class DelayHandle:
    """Handle to a call scheduled on a `TimerQueue`."""

    def __init__(self, name: str, future: Future[Any]) -> None:
        self._name = name
        self._future = future

    def __repr__(self) -> str:
        if self._future.cancelled():
            state = "cancelled"
        elif self._future.done():
            state = "done"
        elif self._future.running():
            state = "running"
        else:
            state = "pending"
        return f"<DelayHandle {self._name} {state}>"

    def cancel(self) -> bool:
        """Cancel the call if it has not started yet.

        Returns:
            bool: True if the call is (now) cancelled; False if it is running
            or has already run.
        """
        cancelled = self._future.cancel()
        if cancelled:
            logger.debug("Cancelled delayed call %s", self._name)
        return cancelled

    def cancelled(self) -> bool:
        """Return True if the call was cancelled."""
        return self._future.cancelled()

    def done(self) -> bool:
        """Return True if the call has run, failed, or was cancelled."""
        return self._future.done()

    def result(self, timeout: float | None = None) -> Any:
        """Wait for the call and return its result.

        Args:
            timeout: Seconds to wait; None waits indefinitely.

        Returns:
            The value returned by the delayed function.

        Raises:
            concurrent.futures.CancelledError: If the call was cancelled.
            TimeoutError: If the call did not complete within *timeout*.
            Exception: Whatever the delayed function raised.
        """
        return self._future.result(timeout)


@dataclass(order=True, frozen=True, slots=True)
class _Entry:
    due: float
    sequence: int
    name: str = field(compare=False)
    call: Callable[[], Any] = field(compare=False)
    future: Future[Any] = field(compare=False)


class TimerQueue:
    """A heap of deferred calls served by one worker thread.

    Calls run no earlier than their due time, one after another, in due-time
    order; calls due at the same time run in the order they were scheduled.
    """

    def __init__(self, thread_name: str | None = None) -> None:
        self._heap: list[_Entry] = []
        self._condition = threading.Condition()
        self._counter = itertools.count()
        self._thread: threading.Thread | None = None
        self._shutdown = False
        self._thread_name = thread_name or config.get_timer_thread_name()

    def schedule(
        self, func: Callable[..., Any], wait_ms: float, /, *args: Any, **kwargs: Any
    ) -> DelayHandle:
        """Schedule ``func(*args, **kwargs)`` to run after *wait_ms* milliseconds.

        Returns immediately.

        Returns:
            DelayHandle: Handle to cancel the call or collect its result.

        Raises:
            InvalidArgumentError: If *func* is not callable or *wait_ms* is not
                a non-negative number.
            SchedulerShutdownError: If the queue has been shut down.
        """
        if not callable(func):
            raise InvalidArgumentError(
                f"delay expects a callable, got {type(func).__name__}"
            )
        wait = _check_wait(wait_ms)
        future: Future[Any] = Future()
        entry = _Entry(
            due=time.monotonic() + wait / 1000,
            sequence=next(self._counter),
            name=_describe(func),
            call=partial(func, *args, **kwargs),
            future=future,
        )
        with self._condition:
            if self._shutdown:
                raise SchedulerShutdownError("cannot schedule on a shut-down timer queue")
            heapq.heappush(self._heap, entry)
            self._ensure_worker()
            self._condition.notify()
        logger.debug("Scheduled %s to run in %s ms", entry.name, wait_ms)
        return DelayHandle(entry.name, future)

    def pending(self) -> int:
        """Return the number of scheduled calls that have not started or been cancelled."""
        with self._condition:
            return sum(1 for entry in self._heap if not entry.future.cancelled())

    def shutdown(self, *, cancel_pending: bool = False, wait: bool = True) -> None:
        """Stop accepting new calls.

        Args:
            cancel_pending: Cancel every call that has not started. Otherwise
                pending calls still run when they fall due.
            wait: Block until the worker thread has finished.
        """
        with self._condition:
            self._shutdown = True
            if cancel_pending:
                for entry in self._heap:
                    entry.future.cancel()
            self._condition.notify_all()
            thread = self._thread
        logger.debug("Timer queue %s shut down", self._thread_name)
        if wait and thread is not None and thread is not threading.current_thread():
            thread.join()

    def _ensure_worker(self) -> None:
        # caller holds the condition lock
        if self._thread is None:
            self._thread = threading.Thread(
                target=self._run, name=self._thread_name, daemon=True
            )
            self._thread.start()

    def _run(self) -> None:
        while (entry := self._next_due()) is not None:
            self._execute(entry)

    def _next_due(self) -> _Entry | None:
        with self._condition:
            while True:
                if not self._heap:
                    if self._shutdown:
                        return None
                    self._condition.wait()
                    continue
                head = self._heap[0]
                if head.future.cancelled():
                    heapq.heappop(self._heap)
                    continue
                if (remaining := head.due - time.monotonic()) > 0:
                    self._condition.wait(remaining)
                    continue
                return heapq.heappop(self._heap)

    @staticmethod
    def _execute(entry: _Entry) -> None:
        if not entry.future.set_running_or_notify_cancel():
            return
        logger.debug("Running delayed call %s", entry.name)
        try:
            result = entry.call()
        except BaseException as exc:  # pylint: disable=broad-exception-caught
            logger.warning("Delayed call %s raised %r", entry.name, exc, exc_info=True)
            entry.future.set_exception(exc)
        else:
            entry.future.set_result(result)


_default_queue: TimerQueue | None = None
_default_lock = threading.Lock()


def get_timer_queue() -> TimerQueue:
    """Return the process-wide timer queue, creating it on first use."""
    global _default_queue  # pylint: disable=global-statement
    with _default_lock:
        if _default_queue is None:
            _default_queue = TimerQueue()
            # run calls still pending when the interpreter exits
            atexit.register(_default_queue.shutdown)
        return _default_queue
