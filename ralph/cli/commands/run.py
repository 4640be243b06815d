from pathlib import Path

import typer
from rich.console import Console

from ralph.application.use_cases.run_iteration import RunIteration
from ralph.cli.formatters.status_formatter import render_iteration, render_status
from ralph.cli.utils import config_option, report_errors, root_option
from ralph.domain.entities.config import RalphConfig
from ralph.domain.entities.run_state import Iteration, RunState
from ralph.domain.value_objects import IterationStatus
from ralph.infrastructure.checks.command_check_runner import CommandCheckRunner
from ralph.infrastructure.persistence.config_loader import load_config
from ralph.infrastructure.persistence.json_state_repo import JsonStateRepo

console = Console()


def execute_iteration(
    root: Path,
    config: RalphConfig,
    repo: JsonStateRepo,
    state: RunState,
) -> Iteration:
    """Run one iteration, persist the state and print the outcome."""
    use_case = RunIteration(CommandCheckRunner())
    iteration = use_case.execute(root, config, state)
    state = repo.save(state)

    render_iteration(console, iteration)
    render_status(console, root, config, state)
    return iteration


def run_iteration(
    root: Path = root_option(),
    config_file: str = config_option(),
) -> None:
    """Run the configured checks once. Exits 1 unless every check passed."""
    with report_errors():
        root = root.resolve()
        config = load_config(root, config_file)
        repo = JsonStateRepo(root, config)
        state = repo.load()
        iteration = execute_iteration(root, config, repo, state)

    if iteration.status != IterationStatus.PASSED:
        raise typer.Exit(1)
