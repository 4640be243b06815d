from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ralph.cli.theme import theme
from ralph.domain.entities.config import RalphConfig
from ralph.domain.entities.run_state import Iteration, RunState
from ralph.domain.value_objects import CheckStatus, LoopStatus
from ralph.infrastructure.utils.formatting import format_duration_ms

CHECK_STATUS_STYLES = {
    CheckStatus.PASSED: theme.STATUS_PASSED,
    CheckStatus.FAILED: theme.STATUS_FAILED,
    CheckStatus.SKIPPED: theme.STATUS_SKIPPED,
}

LOOP_STATUS_STYLES = {
    LoopStatus.IDLE: theme.STATUS_IDLE,
    LoopStatus.FAILED: theme.STATUS_FAILED,
    LoopStatus.COMPLETE: theme.STATUS_COMPLETE,
}


def _file_line(label: str, root_dir: Path, relative: str) -> str:
    found = "present" if (root_dir / relative).exists() else "missing"
    return f"{label}: {relative} ({found})"


def format_status(root_dir: Path, config: RalphConfig, state: RunState) -> str:
    """Plain-text status report.

    Output depends only on the arguments and on whether the task and phases
    files exist under `root_dir`.
    """
    lines = [
        _file_line("Task file", root_dir, config.task_file),
        _file_line("Phases file", root_dir, config.phases_file),
        f"Iterations: {len(state.iterations)}/{config.max_iterations}"
        f" (status: {state.status.value})",
    ]

    latest = state.latest_iteration()
    if latest is None:
        lines.append("No iterations recorded.")
    else:
        lines.append(f"Last iteration: #{latest.index} {latest.status.value}")
        for check in latest.checks:
            lines.append(f"  {check.name}: {check.status.value}")

    return "\n".join(lines)


def status_payload(config: RalphConfig, state: RunState) -> dict[str, Any]:
    return {"config": config.to_json_dict(), "state": state.to_json_dict()}


def render_iteration(console: Console, iteration: Iteration) -> None:
    table = Table(title=f"Iteration {iteration.index}", show_lines=False)
    table.add_column("Check", style=theme.INFO)
    table.add_column("Status")
    table.add_column("Exit", justify="right")
    table.add_column("Duration", justify="right", style=theme.DIM)

    for check in iteration.checks:
        style = CHECK_STATUS_STYLES[check.status]
        table.add_row(
            escape(check.name),
            f"[{style}]{check.status.value.upper()}[/]",
            "-" if check.exit_code is None else str(check.exit_code),
            format_duration_ms(check.duration_ms),
        )

    console.print(table)


def render_status(console: Console, root_dir: Path, config: RalphConfig, state: RunState) -> None:
    style = LOOP_STATUS_STYLES[state.status]
    console.print(f"[{style}]Loop {state.status.value}[/]")
    console.print(
        format_status(root_dir, config, state), markup=False, highlight=False, soft_wrap=True
    )
