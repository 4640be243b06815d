from pathlib import Path

from loguru import logger
from rich.console import Console

from ralph.cli.theme import theme
from ralph.cli.utils import config_option, report_errors, root_option
from ralph.domain.entities.config import RalphConfig, default_config
from ralph.domain.errors import ConfigInvalidError, ConfigMissingError
from ralph.infrastructure.persistence.config_loader import load_config
from ralph.infrastructure.persistence.json_state_repo import JsonStateRepo

console = Console()


def _config_for_reset(root: Path, config_file: str) -> RalphConfig:
    try:
        return load_config(root, config_file)
    except (ConfigMissingError, ConfigInvalidError) as e:
        logger.warning("Using default state path for reset: {}", e)
        return default_config()


def reset_state(
    root: Path = root_option(),
    config_file: str = config_option(),
) -> None:
    """Delete the state file. The config file is left untouched."""
    with report_errors():
        root = root.resolve()
        repo = JsonStateRepo(root, _config_for_reset(root, config_file))

        if repo.remove():
            console.print(f"[{theme.SUCCESS}]Removed state:[/] {repo.path}")
        else:
            console.print(f"[{theme.DIM}]No state to remove at {repo.path}[/]")
