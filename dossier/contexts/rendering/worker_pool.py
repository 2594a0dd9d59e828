"""
Render Worker Pool

Bounded thread pool for concurrent render requests. When every worker is busy
and the backlog is full, new work runs on the submitting thread instead of
being rejected, so callers slow down rather than fail under load.
"""

import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

from dotenv import load_dotenv

from dossier.contexts.rendering.logger import _log_debug, _log_info

load_dotenv()
POOL_MIN_WORKERS = int(os.getenv("DOSSIER_POOL_MIN_WORKERS", "10"))
POOL_MAX_WORKERS = int(os.getenv("DOSSIER_POOL_MAX_WORKERS", "50"))
POOL_QUEUE_CAPACITY = int(os.getenv("DOSSIER_POOL_QUEUE_CAPACITY", "100"))
THREAD_NAME_PREFIX = "render-worker"

# Upper bound on waiting for pre-started workers to check in
PRESTART_TIMEOUT_S = 10.0


class RenderWorkerPool:
    """
    ThreadPoolExecutor with a bounded backlog and caller-runs backpressure.

    At most max_workers + queue_capacity tasks are in flight (running or
    queued). A submit beyond that runs the task synchronously on the caller's
    thread and returns an already completed Future.

    Example:
        with RenderWorkerPool(min_workers=2, max_workers=4, queue_capacity=8) as pool:
            future = pool.submit(pipeline.render_profile_docx, profile)
            rendered = future.result()
    """

    def __init__(
        self,
        min_workers: int = POOL_MIN_WORKERS,
        max_workers: int = POOL_MAX_WORKERS,
        queue_capacity: int = POOL_QUEUE_CAPACITY,
        thread_name_prefix: str = THREAD_NAME_PREFIX,
    ):
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        if not 0 <= min_workers <= max_workers:
            raise ValueError(
                f"min_workers must be between 0 and max_workers ({max_workers}), got {min_workers}"
            )
        if queue_capacity < 0:
            raise ValueError(f"queue_capacity must be non-negative, got {queue_capacity}")

        self.min_workers = min_workers
        self.max_workers = max_workers
        self.queue_capacity = queue_capacity

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix=thread_name_prefix
        )
        self._slots = threading.BoundedSemaphore(max_workers + queue_capacity)
        self._shutdown = False
        self._caller_runs = 0
        self._counter_lock = threading.Lock()

        self._prestart_workers()
        _log_info(
            f"Render worker pool initialized: min={min_workers}, max={max_workers}, "
            f"queue={queue_capacity}"
        )

    def _prestart_workers(self) -> None:
        """
        Start min_workers threads up front.

        ThreadPoolExecutor only spawns a thread when no idle one exists, so each
        warm-up task blocks on a barrier until all of them are running at once.
        """
        if self.min_workers == 0:
            return

        barrier = threading.Barrier(self.min_workers)
        for _ in range(self.min_workers):
            self._executor.submit(barrier.wait, PRESTART_TIMEOUT_S)

    @property
    def caller_runs(self) -> int:
        """Number of tasks that ran on a submitting thread due to backpressure."""
        return self._caller_runs

    def submit(self, fn: Callable, *args, **kwargs) -> Future:
        """
        Schedule fn(*args, **kwargs) and return a Future for its result.

        Exceptions raised by fn are delivered through the Future in both the
        pooled and the caller-runs path.

        Raises:
            RuntimeError: If the pool has been shut down
        """
        if self._shutdown:
            raise RuntimeError("Cannot submit to a shut down RenderWorkerPool")

        if not self._slots.acquire(blocking=False):
            with self._counter_lock:
                self._caller_runs += 1
            _log_debug("Backlog full, running task on the submitting thread")
            return self._run_on_caller(fn, *args, **kwargs)

        try:
            return self._executor.submit(self._run_in_slot, fn, args, kwargs)
        except BaseException:
            self._slots.release()
            raise

    def _run_in_slot(self, fn: Callable, args: tuple, kwargs: dict):
        # Slot is freed before the Future completes, so a caller woken by
        # result() can immediately reuse it
        try:
            return fn(*args, **kwargs)
        finally:
            self._slots.release()

    @staticmethod
    def _run_on_caller(fn: Callable, *args, **kwargs) -> Future:
        future = Future()
        future.set_running_or_notify_cancel()
        try:
            result = fn(*args, **kwargs)
        except Exception as e:
            future.set_exception(e)
        else:
            future.set_result(result)
        return future

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting work and release worker threads."""
        self._shutdown = True
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "RenderWorkerPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.shutdown(wait=True)
        return None
