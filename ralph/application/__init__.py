from ralph.application.use_cases import RunIteration

__all__ = [
    "RunIteration",
]
