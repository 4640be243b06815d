import sys
from pathlib import Path
from typing import Any

import typer
from loguru import logger
from typer.core import TyperGroup

from ralph.cli.commands import init, reset, resume, run, status


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> None:
    """Configure loguru logging."""
    logger.remove()

    if log_file is not None:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",
            rotation="10 MB",
            encoding="utf-8",
        )

    logger.add(
        sys.stderr,
        format="{time:HH:mm:ss} | {level: <8} | {message}",
        level="DEBUG" if verbose else "WARNING",
    )


class RalphGroup(TyperGroup):
    """Command group that prints help and exits 1 on an unknown command."""

    def resolve_command(
        self, ctx: typer.Context, args: list[str]
    ) -> tuple[str | None, Any, list[str]]:
        name = args[0] if args else None
        if name and not name.startswith("-") and self.get_command(ctx, name) is None:
            typer.echo(f"Unknown command: {name}", err=True)
            typer.echo(ctx.get_help())
            ctx.exit(1)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="ralph",
    cls=RalphGroup,
    help="Ralph - run verification checks in a loop until they all pass",
    no_args_is_help=True,
    add_completion=False,
)

# Register commands
app.command(name="init")(init.init_project)
app.command(name="run")(run.run_iteration)
app.command(name="resume")(resume.resume_loop)
app.command(name="status")(status.show_status)
app.command(name="reset")(reset.reset_state)


@app.command(name="help")
def show_help(ctx: typer.Context) -> None:
    """Show this message."""
    typer.echo(ctx.parent.get_help() if ctx.parent else ctx.get_help())


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Also write logs to this file"),
) -> None:
    """Ralph - run verification checks in a loop until they all pass."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
