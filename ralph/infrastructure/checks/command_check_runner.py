import os
import signal
import subprocess
from pathlib import Path

from loguru import logger

from ralph.domain.entities.config import CheckDefinition
from ralph.domain.ports.check_runner_port import CheckRunnerPort


class CommandCheckRunner(CheckRunnerPort):
    """Runs a check as a blocking shell child process.

    stdio is inherited so check output streams straight to the terminal.
    """

    def run_check(self, check: CheckDefinition, cwd: Path) -> int | None:
        env = dict(os.environ)
        timed = check.timeout_seconds is not None

        try:
            proc = subprocess.Popen(
                check.command,
                shell=True,
                cwd=str(cwd),
                env=env,
                # Own process group so a timeout can kill everything the shell started
                start_new_session=timed,
            )
        except OSError as e:
            logger.error("Check '{}' could not be started: {}", check.name, e)
            return None

        try:
            returncode = proc.wait(timeout=check.timeout_seconds)
        except subprocess.TimeoutExpired:
            try:
                os.killpg(os.getpgid(proc.pid), signal.SIGKILL)
            except (ProcessLookupError, OSError):
                proc.kill()
            proc.wait()
            logger.warning(
                "Check '{}' timed out after {}s",
                check.name,
                check.timeout_seconds,
            )
            return None

        # Negative return codes mean the process was killed by a signal
        if returncode < 0:
            logger.warning(
                "Check '{}' terminated by signal {}",
                check.name,
                -returncode,
            )
            return None
        return returncode
