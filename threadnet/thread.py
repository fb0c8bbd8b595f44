"""A named worker thread with an explicit lifecycle."""

from __future__ import annotations

import itertools
import os
import threading
from enum import Enum
from typing import Callable

_name_counter = itertools.count(1)
_counter_lock = threading.Lock()


def _next_name() -> str:
    with _counter_lock:
        return f"Worker-{next(_name_counter)}"


class ThreadStatus(Enum):
    """Lifecycle state of a :class:`Thread`."""

    NEW = "new"
    RUNNING = "running"
    STOP = "stop"


class Thread:
    """Runs ``func`` on its own named thread.

    Names default to ``Worker-1``, ``Worker-2`` and so on, shared across
    all instances.  Python threads cannot be cancelled from outside, so
    :meth:`stop` marks the thread stopped and sets :attr:`stop_requested`
    for the running function to observe.
    """

    def __init__(self, func: Callable[[], object], name: str | None = None) -> None:
        self._func = func
        self.name = name if name is not None else _next_name()
        self.status = ThreadStatus.NEW
        self.joinable = True
        self.pid = 0
        self.lwpid = 0
        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()

    @property
    def stop_requested(self) -> bool:
        """True once :meth:`stop` has been called on the running thread."""
        return self._stop_event.is_set()

    def _routine(self) -> None:
        self.pid = os.getpid()
        self.lwpid = threading.get_native_id()
        self._func()

    def start(self) -> None:
        """Start running the function; a stopped thread may be started again."""
        if self.status is ThreadStatus.RUNNING:
            raise RuntimeError("thread is already running")
        self._stop_event.clear()
        self.joinable = True
        self._thread = threading.Thread(target=self._routine, name=self.name, daemon=True)
        self._thread.start()
        self.status = ThreadStatus.RUNNING

    def stop(self) -> None:
        """Mark a running thread as stopped and signal it to finish."""
        if self.status is not ThreadStatus.RUNNING:
            raise RuntimeError(
                f"thread status is {self.status.name}, only a running thread can be stopped"
            )
        self._stop_event.set()
        self.status = ThreadStatus.STOP

    def join(self) -> None:
        """Wait for the thread to finish and report it on standard output."""
        if not self.joinable:
            raise RuntimeError(
                f"lwp: {self.lwpid}, name: {self.name}, join failed, because thread is detached"
            )
        if self._thread is None:
            raise RuntimeError(f"thread {self.name} was never started")
        self._thread.join()
        print(f"lwp: {self.lwpid}, name: {self.name}, join success")

    def detach(self) -> None:
        """Give up the right to join a running thread."""
        if self.joinable and self.status is ThreadStatus.RUNNING:
            self.joinable = False