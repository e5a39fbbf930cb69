"""Background work for UI events with a single-flight guard per key."""

import itertools
import queue
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable

from structlog.contextvars import bound_contextvars

from hikeon.logging_config import logger

Callback = Callable[[Any], None]


class TaskRunner:
    """Run callables off the UI thread and deliver results through ``dispatch``.

    Each submission is tagged with a key (one per input field or button).
    Submitting again under the same key supersedes the earlier task, and
    ``cancel``/``shutdown`` drop pending results. Only the newest live task for
    a key ever reaches its callbacks.
    """

    def __init__(self, dispatch: Callable[[Callable[[], None]], None], max_workers: int = 4):
        self._dispatch = dispatch
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="hikeon")
        self._lock = threading.Lock()
        self._current: dict[str, int] = {}
        self._ids = itertools.count(1)
        self._closed = False

    def submit(
        self,
        key: str,
        fn: Callable[[], Any],
        on_result: Callback,
        on_error: Callback | None = None,
    ) -> Future:
        with self._lock:
            if self._closed:
                raise RuntimeError("TaskRunner is shut down")
            task_id = next(self._ids)
            self._current[key] = task_id
        return self._executor.submit(self._run, key, task_id, fn, on_result, on_error)

    def is_current(self, key: str, task_id: int) -> bool:
        with self._lock:
            return not self._closed and self._current.get(key) == task_id

    def cancel(self, key: str) -> None:
        with self._lock:
            if self._current.pop(key, None) is not None:
                logger.info("TASK_CANCELLED", key=key)

    def shutdown(self) -> None:
        with self._lock:
            self._closed = True
            self._current.clear()
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _run(self, key, task_id, fn, on_result, on_error):
        with bound_contextvars(task_key=key, task_id=task_id):
            try:
                result = fn()
            except Exception as exc:
                logger.exception("TASK_FAILED", error=str(exc))
                self._deliver(key, task_id, on_error, exc)
                return
            self._deliver(key, task_id, on_result, result)

    def _deliver(self, key, task_id, callback, value):
        if callback is None:
            return
        if not self.is_current(key, task_id):
            logger.info("TASK_RESULT_DROPPED", key=key, task_id=task_id)
            return

        def deliver():
            # Re-checked on the UI thread: a newer submit may have landed meanwhile.
            if self.is_current(key, task_id):
                callback(value)

        self._dispatch(deliver)


class UiDispatcher:
    """Queue of callbacks drained on the Tk thread with ``after``."""

    def __init__(self, root, interval_ms: int = 50):
        self.root = root
        self.interval_ms = interval_ms
        self._queue: queue.Queue = queue.Queue()
        self._after_id = None

    def __call__(self, callback: Callable[[], None]) -> None:
        self._queue.put(callback)

    def start(self) -> None:
        self._drain()

    def stop(self) -> None:
        if self._after_id is not None:
            self.root.after_cancel(self._after_id)
            self._after_id = None

    def drain_pending(self) -> None:
        while True:
            try:
                callback = self._queue.get_nowait()
            except queue.Empty:
                return
            try:
                callback()
            except Exception as exc:
                logger.exception("UI_CALLBACK_FAILED", error=str(exc))

    def _drain(self) -> None:
        try:
            self.drain_pending()
        finally:
            self._after_id = self.root.after(self.interval_ms, self._drain)
