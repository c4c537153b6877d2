"""Progress reporter implementations.

This package contains concrete implementations of progress reporters.
"""

from shared.implementations.reporters.logging_reporter import LoggingProgressReporter
from shared.implementations.reporters.null_reporter import NullProgressReporter

__all__ = ["LoggingProgressReporter", "NullProgressReporter"]
