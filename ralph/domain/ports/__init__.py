from ralph.domain.ports.check_runner_port import CheckRunnerPort
from ralph.domain.ports.state_repo_port import StateRepoPort

__all__ = [
    "CheckRunnerPort",
    "StateRepoPort",
]
