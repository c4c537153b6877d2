"""Factory for creating progress reporter instances."""

from shared.interfaces.progress_reporter import ProgressReporter
from shared.implementations.reporters import LoggingProgressReporter, NullProgressReporter
from shared.domain.consts import ReporterName


REPORTERS: dict[str, type[ProgressReporter]] = {
    ReporterName.LOG.value: LoggingProgressReporter,
    ReporterName.NONE.value: NullProgressReporter,
}


def create_reporter(reporter_name: str) -> ProgressReporter:
    """Factory for creating progress reporters.

    Returns:
        ProgressReporter instance

    Raises:
        ValueError: If reporter_name is unknown
    """
    try:
        reporter_cls = REPORTERS[ReporterName(reporter_name).value]
    except ValueError:
        raise ValueError(f"Unknown progress reporter: {reporter_name}")
    return reporter_cls()
