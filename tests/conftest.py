import json
from collections.abc import Callable, Iterator
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
from loguru import logger

from ralph.domain.entities.config import CheckDefinition
from ralph.domain.ports.check_runner_port import CheckRunnerPort


class FakeCheckRunner(CheckRunnerPort):
    """Returns scripted exit codes keyed by command and records what ran."""

    def __init__(self, exit_codes: dict[str, int | None] | None = None) -> None:
        self.exit_codes = exit_codes or {}
        self.calls: list[tuple[str, Path]] = []

    def run_check(self, check: CheckDefinition, cwd: Path) -> int | None:
        self.calls.append((check.command, cwd))
        return self.exit_codes.get(check.command, 0)


class StepClock:
    """Deterministic clock advancing by a fixed step on every call."""

    def __init__(self, start: datetime, step_ms: int = 250) -> None:
        self.current = start
        self.step = timedelta(milliseconds=step_ms)

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def write_config(project_root: Path) -> Callable[[dict[str, Any]], Path]:
    def _write(data: dict[str, Any], filename: str = "ralph.config.json") -> Path:
        path = project_root / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def clock() -> StepClock:
    return StepClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def make_runner() -> Callable[..., FakeCheckRunner]:
    return FakeCheckRunner


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    # CLI tests point loguru at streams that are closed once the test ends
    yield
    logger.remove()
