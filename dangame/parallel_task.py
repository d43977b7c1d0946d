"""Run a piece of work on a background thread and report its progress."""

from __future__ import annotations

import threading
from typing import Callable, Optional

Work = Callable[[Callable[[float], None]], None]


class ParallelTask:
    """Runs ``work`` in a thread; ``work`` receives a callback to report progress in [0, 1]."""

    def __init__(self, work: Optional[Work] = None) -> None:
        self._work = work
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None
        self._finished = False
        self._completion = 0.0
        self.error: Optional[BaseException] = None

    def execute(self) -> None:
        """Start the work; RuntimeError if it is still running."""
        if self._thread is not None and self._thread.is_alive():
            raise RuntimeError("task is already running")
        with self._lock:
            self._finished = False
            self._completion = 0.0
            self.error = None
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def is_finished(self) -> bool:
        with self._lock:
            return self._finished

    def completion(self) -> float:
        with self._lock:
            return self._completion

    def _report(self, fraction: float) -> None:
        with self._lock:
            self._completion = min(max(float(fraction), 0.0), 1.0)

    def _run(self) -> None:
        error: Optional[BaseException] = None
        try:
            if self._work is not None:
                self._work(self._report)
        except Exception as exc:  # reported through ``error``
            error = exc
        with self._lock:
            self.error = error
            if error is None:
                self._completion = 1.0
            self._finished = True