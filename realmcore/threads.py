"""Worker threads with per-thread ids and send buffer pools."""

from __future__ import annotations

import itertools
import threading
from collections.abc import Callable
from dataclasses import dataclass

from realmcore.send_buffer import SendBufferManager

_local = threading.local()
_ids = itertools.count(1)
_ids_lock = threading.Lock()


def current_thread_id() -> int:
    """Id given to the current managed thread, or 0 outside one."""
    return getattr(_local, "thread_id", 0)


def current_send_buffer_manager() -> SendBufferManager:
    """The send buffer pool of the current thread, created on first use."""
    manager = getattr(_local, "send_buffer_manager", None)
    if manager is None:
        manager = SendBufferManager()
        _local.send_buffer_manager = manager
    return manager


@dataclass
class Task:
    """A unit of work to run later."""

    f: Callable[[], None] | None = None

    def execute(self) -> None:
        if self.f is None:
            raise RuntimeError("task has no function to run")
        self.f()


class ThreadManager:
    """Starts worker threads, giving each an id and its own send buffer pool."""

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []

    def create_thread(self, callback: Callable[[], None]) -> threading.Thread:
        thread = threading.Thread(target=self._run, args=(callback,))
        self._threads.append(thread)
        thread.start()
        return thread

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        with _ids_lock:
            _local.thread_id = next(_ids)
        _local.send_buffer_manager = SendBufferManager()
        try:
            callback()
        finally:
            _local.send_buffer_manager = None

    def join_all(self) -> None:
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> ThreadManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.join_all()