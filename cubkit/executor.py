"""A fixed pool of worker threads running submitted callables."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from types import TracebackType
from typing import Any

__all__ = ["Executor"]


class Executor:
    """Runs callables on ``thread_num`` worker threads in submission order.

    On shutdown the workers finish every task already queued before they exit.
    """

    def __init__(self, thread_num: int) -> None:
        if thread_num < 0:
            raise ValueError("thread_num must not be negative")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._condition = threading.Condition()
        self._stop = False
        self._workers = [
            threading.Thread(target=self._run, name=f"executor-{i}", daemon=True)
            for i in range(thread_num)
        ]
        for worker in self._workers:
            worker.start()

    def _run(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stop or bool(self._tasks))
                if self._stop and not self._tasks:
                    return
                future, func, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)

    def execute(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``func(*args, **kwargs)`` and return a Future for its result."""
        future: Future = Future()
        with self._condition:
            if self._stop:
                raise RuntimeError("cannot execute tasks after shutdown")
            self._tasks.append((future, func, args, kwargs))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, let the queue drain and join the workers."""
        with self._condition:
            self._stop = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def __enter__(self) -> Executor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()