from ralph.application.use_cases.run_iteration import RunIteration

__all__ = [
    "RunIteration",
]
