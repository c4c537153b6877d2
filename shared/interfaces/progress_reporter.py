"""Abstract progress reporter interface."""

from abc import ABC, abstractmethod


class ProgressReporter(ABC):
    """Advisory progress instrumentation for long-running operations.

    All reporters must implement:
    - start: Begin tracking a unit of work of known size
    - advance: Record completed items (may be called from worker threads)
    - finish: Mark the tracked work as complete

    Reporters never affect results; a failing or slow reporter must not be
    a correctness dependency.
    """

    @abstractmethod
    def start(self, total: int, label: str) -> None:
        """Begin tracking `total` items of work described by `label`."""
        pass

    @abstractmethod
    def advance(self, count: int = 1) -> None:
        """Record `count` more completed items.

        Must be safe to call concurrently from several threads.
        """
        pass

    @abstractmethod
    def finish(self) -> None:
        """Mark the current work as complete."""
        pass
