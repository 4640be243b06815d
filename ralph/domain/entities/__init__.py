from ralph.domain.entities.config import CheckDefinition, RalphConfig, default_config
from ralph.domain.entities.run_state import (
    CheckResult,
    Iteration,
    RunState,
    create_initial_state,
)

__all__ = [
    "CheckDefinition",
    "CheckResult",
    "Iteration",
    "RalphConfig",
    "RunState",
    "create_initial_state",
    "default_config",
]
