from pathlib import Path

import typer
from rich.console import Console

from ralph.cli.commands.run import execute_iteration
from ralph.cli.theme import theme
from ralph.cli.utils import config_option, report_errors, root_option
from ralph.domain.value_objects import IterationStatus, LoopStatus
from ralph.infrastructure.persistence.config_loader import load_config
from ralph.infrastructure.persistence.json_state_repo import JsonStateRepo

console = Console()


def resume_loop(
    root: Path = root_option(),
    config_file: str = config_option(),
) -> None:
    """Run the next iteration unless the loop is already complete."""
    with report_errors():
        root = root.resolve()
        config = load_config(root, config_file)
        repo = JsonStateRepo(root, config)
        state = repo.load()

        if state.status == LoopStatus.COMPLETE:
            console.print(f"[{theme.SUCCESS}]Loop already complete, nothing to resume.[/]")
            return

        iteration = execute_iteration(root, config, repo, state)

    if iteration.status != IterationStatus.PASSED:
        raise typer.Exit(1)
