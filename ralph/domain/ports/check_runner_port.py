from abc import ABC, abstractmethod
from pathlib import Path

from ralph.domain.entities.config import CheckDefinition


class CheckRunnerPort(ABC):
    """Port for running checks."""

    @abstractmethod
    def run_check(self, check: CheckDefinition, cwd: Path) -> int | None:
        """Run a single check to completion.

        Returns the process exit code, or None when the process did not report
        one (it could not be started, was killed by a signal, or timed out).
        """
