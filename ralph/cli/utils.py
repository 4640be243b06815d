"""CLI utility functions."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from rich.console import Console

from ralph.domain.entities.config import CONFIG_FILENAME
from ralph.domain.errors import RalphError

err_console = Console(stderr=True)


def root_option() -> Any:
    return typer.Option(Path("."), "--root", "-r", help="Project root directory")


def config_option() -> Any:
    return typer.Option(CONFIG_FILENAME, "--config", "-c", help="Config filename")


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn ralph errors into `Ralph error: <message>` on stderr and exit code 1."""
    try:
        yield
    except RalphError as e:
        logger.debug("Command failed: {}", e)
        err_console.print(f"Ralph error: {e}", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(1) from None
