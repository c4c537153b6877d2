"""Status enums for configuration runs."""

from enum import Enum


class RunStatus(str, Enum):
    """Outcome of one configuration run."""
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"
