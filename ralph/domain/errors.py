from pathlib import Path


class RalphError(Exception):
    """Base class for errors reported to the user as `Ralph error: ...`."""


class ConfigMissingError(RalphError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Config file not found: {path} (run 'ralph init' to create one)")


class ConfigInvalidError(RalphError):
    """Config file exists but is not valid JSON or fails validation.

    Each violation is kept in `problems` and listed in the message.
    """

    def __init__(self, path: Path, problems: list[str]) -> None:
        self.path = path
        self.problems = problems
        details = "; ".join(problems)
        super().__init__(f"Invalid config {path}: {details}")


class StateInvalidError(RalphError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Unreadable state file {path}: {reason}")


class LoopAlreadyCompleteError(RalphError):
    def __init__(self) -> None:
        super().__init__("Loop is already complete; run 'ralph reset' to start over")


class IterationBudgetExhaustedError(RalphError):
    def __init__(self, max_iterations: int, recorded: int) -> None:
        self.max_iterations = max_iterations
        self.recorded = recorded
        super().__init__(
            f"Iteration budget exhausted: {recorded} iterations recorded, "
            f"maxIterations is {max_iterations}"
        )


class StateWriteError(RalphError):
    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot write state file {path}: {reason}")
