"""Progress reporter that discards everything."""

from shared.interfaces.progress_reporter import ProgressReporter


class NullProgressReporter(ProgressReporter):
    """Reporter used when progress output is disabled."""

    def start(self, total: int, label: str) -> None:
        pass

    def advance(self, count: int = 1) -> None:
        pass

    def finish(self) -> None:
        pass
