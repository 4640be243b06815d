from enum import Enum


class LoopStatus(str, Enum):
    IDLE = "idle"
    FAILED = "failed"
    COMPLETE = "complete"


class IterationStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"


class CheckStatus(str, Enum):
    PASSED = "passed"
    FAILED = "failed"
    SKIPPED = "skipped"
