from ralph.domain.value_objects.statuses import CheckStatus, IterationStatus, LoopStatus

__all__ = [
    "CheckStatus",
    "IterationStatus",
    "LoopStatus",
]
