from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from loguru import logger

from ralph.domain.entities.config import CheckDefinition, RalphConfig
from ralph.domain.entities.run_state import CheckResult, Iteration, RunState, utc_now
from ralph.domain.errors import IterationBudgetExhaustedError, LoopAlreadyCompleteError
from ralph.domain.ports.check_runner_port import CheckRunnerPort
from ralph.domain.value_objects import CheckStatus, IterationStatus, LoopStatus

# Exit code recorded when a process reports no numeric status
UNKNOWN_EXIT_CODE = 1


def _duration_ms(start: datetime, end: datetime) -> int:
    return max(0, int((end - start).total_seconds() * 1000))


class RunIteration:
    """Run every configured check once and append the result to the state.

    Only the in-memory state is mutated. Callers persist it afterwards.
    """

    def __init__(
        self,
        check_runner: CheckRunnerPort,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.check_runner = check_runner
        self.clock = clock

    def execute(self, root_dir: Path, config: RalphConfig, state: RunState) -> Iteration:
        if state.status == LoopStatus.COMPLETE:
            raise LoopAlreadyCompleteError()
        if len(state.iterations) >= config.max_iterations:
            raise IterationBudgetExhaustedError(config.max_iterations, len(state.iterations))

        index = len(state.iterations) + 1
        started_at = self.clock()
        logger.info("Starting iteration {} ({} checks)", index, len(config.checks))

        results: list[CheckResult] = []
        should_skip = False
        for check in config.checks:
            if should_skip:
                results.append(self._skipped(check))
                continue

            result = self._run(check, root_dir)
            results.append(result)
            if result.status == CheckStatus.FAILED and config.stop_on_failure:
                should_skip = True

        finished_at = self.clock()
        passed = all(r.status == CheckStatus.PASSED for r in results)

        iteration = Iteration(
            index=index,
            started_at=started_at,
            finished_at=finished_at,
            status=IterationStatus.PASSED if passed else IterationStatus.FAILED,
            checks=results,
        )
        state.add_iteration(iteration)
        state.status = LoopStatus.COMPLETE if passed else LoopStatus.FAILED
        state.updated_at = finished_at

        logger.info("Iteration {} {}", index, iteration.status.value)
        return iteration

    def _run(self, check: CheckDefinition, root_dir: Path) -> CheckResult:
        logger.info("Running check '{}': {}", check.name, check.command)
        start = self.clock()
        exit_code = self.check_runner.run_check(check, root_dir)
        end = self.clock()

        if exit_code is None:
            logger.warning(
                "Check '{}' reported no exit status, recording exit code {}",
                check.name,
                UNKNOWN_EXIT_CODE,
            )
            exit_code = UNKNOWN_EXIT_CODE

        status = CheckStatus.PASSED if exit_code == 0 else CheckStatus.FAILED
        duration_ms = _duration_ms(start, end)
        logger.info(
            "Check '{}' {} (exit {}, {}ms)", check.name, status.value, exit_code, duration_ms
        )
        return CheckResult(
            name=check.name,
            command=check.command,
            status=status,
            exit_code=exit_code,
            started_at=start,
            finished_at=end,
            duration_ms=duration_ms,
        )

    def _skipped(self, check: CheckDefinition) -> CheckResult:
        logger.warning("Skipping check '{}' after earlier failure", check.name)
        now = self.clock()
        return CheckResult(
            name=check.name,
            command=check.command,
            status=CheckStatus.SKIPPED,
            exit_code=None,
            started_at=now,
            finished_at=now,
            duration_ms=0,
        )
