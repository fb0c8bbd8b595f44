"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import sys
import threading
import time
from collections import deque
from typing import Callable, ClassVar

from threadnet.logger import LogLevel, log, logger
from threadnet.thread import Thread

DEFAULT_THREAD_COUNT = 5

Task = Callable[[], object]


class ThreadPool:
    """Runs queued tasks on a fixed set of worker threads.

    Tasks are only accepted while the pool is running.  After :meth:`stop`
    the workers finish whatever is still queued and then exit, so
    :meth:`wait` returns once every accepted task has run.
    """

    _instance: ClassVar[ThreadPool | None] = None
    _singleton_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, num: int = DEFAULT_THREAD_COUNT) -> None:
        if num < 1:
            raise ValueError("a thread pool needs at least one thread")
        self.num = num
        self._running = False
        self._sleepers = 0
        self._queue: deque[Task] = deque()
        self._cond = threading.Condition(threading.Lock())
        self.threads = [Thread(self._routine) for _ in range(num)]

    @classmethod
    def get_instance(cls) -> ThreadPool:
        """Return the shared pool of this class, creating it on first use."""
        instance = cls.__dict__.get("_instance")
        if instance is None:
            with cls._singleton_lock:
                instance = cls.__dict__.get("_instance")
                if instance is None:
                    log(LogLevel.DEBUG, "首次使用，创建对象")
                    instance = cls()
                    cls._instance = instance
        return instance

    @property
    def is_running(self) -> bool:
        """True between :meth:`start` and :meth:`stop`."""
        with self._cond:
            return self._running

    @property
    def pending(self) -> int:
        """Number of tasks waiting in the queue."""
        with self._cond:
            return len(self._queue)

    def _routine(self) -> None:
        name = threading.current_thread().name
        while True:
            with self._cond:
                while not self._queue and self._running:
                    self._sleepers += 1
                    log(LogLevel.DEBUG, "没有任务，线程休眠: |", name, "|")
                    self._cond.wait()
                    log(LogLevel.DEBUG, "有任务，线程唤醒: |", name, "|")
                    self._sleepers -= 1
                if not self._queue and not self._running:
                    log(LogLevel.INFO, "Thread: ", name, " quit")
                    break
                task = self._queue.popleft()
            # The task is private to this worker now; run it outside the lock.
            try:
                task()
            except Exception as exc:  # keep the worker alive for later tasks
                log(LogLevel.ERROR, "task failed on |", name, "|: ", exc)

    def start(self) -> None:
        """Start every worker; does nothing if the pool is already running."""
        with self._cond:
            if self._running:
                return
            self._running = True
            for thread in self.threads:
                thread.start()

    def enqueue(self, task: Task) -> bool:
        """Queue a task; returns False and drops it when the pool is not running."""
        with self._cond:
            if not self._running:
                return False
            self._queue.append(task)
            if self._sleepers > 0:
                self._cond.notify()
            return True

    def stop(self) -> None:
        """Stop accepting tasks and let the workers drain the queue and exit."""
        with self._cond:
            if not self._running:
                return
            log(LogLevel.DEBUG, "关闭线程池")
            self._running = False
            if self._sleepers > 0:
                self._cond.notify_all()

    def wait(self) -> None:
        """Join every worker."""
        for thread in self.threads:
            thread.join()


def _current_name() -> str:
    return threading.current_thread().name


def task1() -> None:
    """Log a greeting from the current thread."""
    log(LogLevel.DEBUG, "执行任务1: 打印消息 |", _current_name(), "|")


def task2() -> None:
    """Log a small sum computed on the current thread."""
    log(LogLevel.DEBUG, "执行任务2: 计算 1+1 = ", 1 + 1, " |", _current_name(), "|")


def main(argv: list[str] | None = None) -> int:
    """Feed the shared pool ten rounds of both tasks, then shut it down."""
    logger.use_console_strategy()

    log(LogLevel.DEBUG, "进程已经跑了很久了")
    time.sleep(3)

    ThreadPool.get_instance().start()

    for cnt in range(9, -1, -1):
        log(LogLevel.DEBUG, "-----------------------", cnt)
        time.sleep(1)
        ThreadPool.get_instance().enqueue(task1)
        time.sleep(1)
        ThreadPool.get_instance().enqueue(task2)

    ThreadPool.get_instance().stop()
    ThreadPool.get_instance().wait()
    return 0


if __name__ == "__main__":
    sys.exit(main())