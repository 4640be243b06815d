from pathlib import Path

from rich.console import Console

from ralph.cli.theme import theme
from ralph.cli.utils import config_option, report_errors, root_option
from ralph.domain.entities.run_state import create_initial_state
from ralph.infrastructure.persistence.config_loader import config_path, write_default_config
from ralph.infrastructure.persistence.json_state_repo import JsonStateRepo

console = Console()


def init_project(
    root: Path = root_option(),
    config_file: str = config_option(),
) -> None:
    """Create the default config and an empty state file if missing."""
    with report_errors():
        root = root.resolve()
        path = config_path(root, config_file)
        existed = path.exists()

        config = write_default_config(root, config_file)
        if existed:
            console.print(f"[{theme.DIM}]Config already exists:[/] {path}")
        else:
            console.print(f"[{theme.SUCCESS}]Created config:[/] {path}")

        repo = JsonStateRepo(root, config)
        if repo.path.exists():
            console.print(f"[{theme.DIM}]State already exists:[/] {repo.path}")
        else:
            repo.save(create_initial_state())
            console.print(f"[{theme.SUCCESS}]Created state:[/] {repo.path}")
