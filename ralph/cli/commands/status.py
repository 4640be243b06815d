import json
from pathlib import Path

import typer
from rich.console import Console

from ralph.cli.formatters.status_formatter import render_status, status_payload
from ralph.cli.utils import config_option, report_errors, root_option
from ralph.infrastructure.persistence.config_loader import load_config
from ralph.infrastructure.persistence.json_state_repo import JsonStateRepo

console = Console()


def show_status(
    root: Path = root_option(),
    config_file: str = config_option(),
    as_json: bool = typer.Option(False, "--json", help="Print config and state as JSON"),
) -> None:
    """Show loop status."""
    with report_errors():
        root = root.resolve()
        config = load_config(root, config_file)
        state = JsonStateRepo(root, config).load()

    if as_json:
        typer.echo(json.dumps(status_payload(config, state), indent=2))
        return

    render_status(console, root, config, state)
