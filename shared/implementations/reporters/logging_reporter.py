"""Progress reporter that writes periodic log lines."""

import logging
import threading
import time
from typing import Optional

from shared.config.config import config
from shared.interfaces.progress_reporter import ProgressReporter

logger = logging.getLogger(__name__)


class LoggingProgressReporter(ProgressReporter):
    """Log completion counts every `every` items.

    Format: "<label>: 20000/100000 (20%) 1.52s"
    """

    def __init__(self, every: Optional[int] = None) -> None:
        self.every = max(1, every if every is not None else config.PROGRESS_EVERY)
        self.total = 0
        self.completed = 0
        self.label = ""
        self._next_report = self.every
        self._started_at = 0.0
        self._lock = threading.Lock()

    def start(self, total: int, label: str) -> None:
        with self._lock:
            self.total = total
            self.completed = 0
            self.label = label
            self._next_report = self.every
            self._started_at = time.perf_counter()
        logger.info(f"{label}: starting ({total} items)")

    def advance(self, count: int = 1) -> None:
        with self._lock:
            self.completed += count
            if self.completed < self._next_report:
                return
            # Skip ahead past any thresholds crossed by a large advance
            while self._next_report <= self.completed:
                self._next_report += self.every
            message = self._format_progress()
        logger.info(message)

    def finish(self) -> None:
        with self._lock:
            message = self._format_progress()
        logger.info(f"{message} - done")

    def _format_progress(self) -> str:
        """Caller must hold the lock."""
        percent = (100 * self.completed // self.total) if self.total else 100
        elapsed = time.perf_counter() - self._started_at
        return f"{self.label}: {self.completed}/{self.total} ({percent}%) {elapsed:.2f}s"
