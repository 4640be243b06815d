import time
from pathlib import Path

import pytest

from ralph.domain.entities.config import CheckDefinition
from ralph.infrastructure.checks.command_check_runner import CommandCheckRunner


@pytest.fixture
def runner() -> CommandCheckRunner:
    return CommandCheckRunner()


def make_check(command: str, timeout_seconds: float | None = None) -> CheckDefinition:
    return CheckDefinition(name="test-check", command=command, timeout_seconds=timeout_seconds)


class TestCommandCheckRunner:
    def test_successful_command_returns_zero(
        self, runner: CommandCheckRunner, tmp_path: Path
    ) -> None:
        assert runner.run_check(make_check("exit 0"), tmp_path) == 0

    def test_failing_command_returns_its_exit_code(
        self, runner: CommandCheckRunner, tmp_path: Path
    ) -> None:
        assert runner.run_check(make_check("exit 3"), tmp_path) == 3

    def test_runs_through_a_shell(self, runner: CommandCheckRunner, tmp_path: Path) -> None:
        assert runner.run_check(make_check("true && false || exit 7"), tmp_path) == 7

    def test_runs_in_given_directory(self, runner: CommandCheckRunner, tmp_path: Path) -> None:
        runner.run_check(make_check("pwd > where.txt"), tmp_path)

        assert (tmp_path / "where.txt").read_text().strip() == str(tmp_path)

    def test_inherits_environment(
        self,
        runner: CommandCheckRunner,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("RALPH_TEST_VALUE", "abc123")

        exit_code = runner.run_check(make_check('test "$RALPH_TEST_VALUE" = abc123'), tmp_path)

        assert exit_code == 0

    def test_missing_directory_returns_none(
        self, runner: CommandCheckRunner, tmp_path: Path
    ) -> None:
        assert runner.run_check(make_check("exit 0"), tmp_path / "does-not-exist") is None

    def test_signal_termination_returns_none(
        self, runner: CommandCheckRunner, tmp_path: Path
    ) -> None:
        assert runner.run_check(make_check("kill -9 $$"), tmp_path) is None

    def test_timeout_returns_none(self, runner: CommandCheckRunner, tmp_path: Path) -> None:
        start = time.monotonic()

        exit_code = runner.run_check(make_check("sleep 10", timeout_seconds=0.5), tmp_path)

        assert exit_code is None
        assert time.monotonic() - start < 5

    def test_timeout_kills_processes_started_by_the_shell(
        self, runner: CommandCheckRunner, tmp_path: Path
    ) -> None:
        command = "sh -c 'sleep 1; touch marker'; true"

        exit_code = runner.run_check(make_check(command, timeout_seconds=0.3), tmp_path)
        time.sleep(1.5)

        assert exit_code is None
        assert not (tmp_path / "marker").exists()

    def test_untimed_check_still_runs_nested_commands(
        self, runner: CommandCheckRunner, tmp_path: Path
    ) -> None:
        exit_code = runner.run_check(make_check("sh -c 'touch marker'"), tmp_path)

        assert exit_code == 0
        assert (tmp_path / "marker").exists()
