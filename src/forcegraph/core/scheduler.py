"""
RecurringTask: a cancellable handle on a periodic callback.

The callback runs on a daemon thread. Between runs the thread waits on an
Event, so cancel() takes effect immediately instead of after the period.
A run that raises is logged and the schedule continues.
"""

from __future__ import annotations
from typing import Callable
import logging
import threading

logger = logging.getLogger(__name__)


class RecurringTask:
    """Calls `callback` every `period` seconds until cancelled."""

    def __init__(self, period: float, callback: Callable[[], object], name: str = "recurring-task"):
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self.period = period
        self.callback = callback
        self.name = name
        self.runs = 0
        self._cancelled = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def alive(self) -> bool:
        return (
            self._thread is not None
            and self._thread.is_alive()
            and not self._cancelled.is_set()
        )

    def start(self) -> "RecurringTask":
        if self._thread is not None:
            raise RuntimeError(f"{self.name} already started")
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        return self

    def cancel(self, timeout: float | None = None) -> None:
        """
        Stop scheduling further runs.

        Waits for an in-flight run to finish, except when called from that
        run itself. Once this returns without a timeout the worker thread
        is gone, so a replacement task never overlaps it.
        """
        self._cancelled.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self) -> None:
        logger.debug("%s started (period %.3fs)", self.name, self.period)
        while not self._cancelled.wait(self.period):
            try:
                self.callback()
            except Exception:
                logger.exception("%s: run %d failed", self.name, self.runs)
            self.runs += 1
        logger.debug("%s stopped after %d runs", self.name, self.runs)
