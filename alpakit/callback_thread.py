"""A lazily started worker thread that runs submitted callables in order."""

from __future__ import annotations

import collections
import threading
from concurrent.futures import Future
from typing import Callable

__all__ = ["CallbackThread"]


class CallbackThread:
    """Runs nullary callables one after another on a single background thread.

    Each submission returns a future that completes once the callable has run
    and been released; an exception raised by the callable is set on the future.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._tasks: collections.deque[tuple[Callable[[], object], Future]] = collections.deque()
        self._stop = False
        self._thread: threading.Thread | None = None

    def submit(self, fn: Callable[[], object]) -> Future:
        """Queue ``fn`` for execution and return a future for its completion."""
        if not callable(fn):
            raise TypeError("submitted object must be callable without arguments")
        future: Future = Future()
        with self._cond:
            if self._stop:
                raise RuntimeError("cannot submit to a closed CallbackThread")
            self._tasks.append((fn, future))
            if self._thread is None:
                self._thread = threading.Thread(target=self._work, daemon=True)
                self._thread.start()
            self._cond.notify()
        return future

    def empty(self) -> bool:
        """True if no task is queued or running."""
        with self._cond:
            return not self._tasks

    def close(self) -> None:
        """Finish all queued tasks and stop the worker thread."""
        with self._cond:
            self._stop = True
            self._cond.notify()
            thread = self._thread
        if thread is None:
            return
        if thread is threading.current_thread():
            raise RuntimeError("CallbackThread cannot join itself")
        thread.join()

    def __enter__(self) -> CallbackThread:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.close()
        return False

    def _work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stop or bool(self._tasks))
                if not self._tasks:
                    break
                fn, future = self._tasks[0]

            error: BaseException | None = None
            run = future.set_running_or_notify_cancel()
            if run:
                try:
                    fn()
                except BaseException as exc:  # delivered through the future
                    error = exc

            with self._cond:
                self._tasks.popleft()
            # The callable is released before the future is completed.
            del fn

            if not run:
                continue
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(None)