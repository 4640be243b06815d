from __future__ import annotations

import json
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from filelock import FileLock
from loguru import logger
from pydantic import ValidationError

from ralph.domain.entities.config import RalphConfig
from ralph.domain.entities.run_state import Iteration, RunState, create_initial_state, utc_now
from ralph.domain.errors import StateInvalidError, StateWriteError
from ralph.domain.ports.state_repo_port import StateRepoPort
from ralph.domain.value_objects import LoopStatus
from ralph.infrastructure.persistence.atomic_io import atomic_write


def _parse_timestamp(value: Any, fallback: datetime) -> datetime:
    if not isinstance(value, str):
        return fallback
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return fallback
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


class JsonStateRepo(StateRepoPort):
    """Run state stored as a single JSON document at `config.state_file`.

    The file is written only by ralph, so a partly corrupted history is
    trimmed on load instead of rejected: malformed iterations are dropped and
    an unknown loop status reads as idle. A file that is not a JSON object at
    all is still an error.

    Writes and removal are serialized with an advisory lock next to the
    state file. Reads take no lock.
    """

    def __init__(
        self,
        root_dir: Path,
        config: RalphConfig,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.root_dir = root_dir
        self.path = (root_dir / config.state_file).resolve()
        self.clock = clock

    @property
    def lock_path(self) -> Path:
        return self.path.with_name(self.path.name + ".lock")

    def load(self) -> RunState:
        if not self.path.exists():
            logger.debug("No state file at {}, starting idle", self.path)
            return create_initial_state(self.clock())

        # Writes are atomic renames, so reading needs no lock
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise StateInvalidError(self.path, f"not valid JSON ({e})") from None
        except OSError as e:
            raise StateInvalidError(self.path, f"cannot be read ({e})") from None
        if not isinstance(raw, dict):
            raise StateInvalidError(self.path, "top-level value must be a JSON object")

        return self._normalize(raw)

    def save(self, state: RunState) -> RunState:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with FileLock(self.lock_path):
                state.updated_at = self.clock()
                atomic_write(self.path, json.dumps(state.to_json_dict(), indent=2) + "\n")
        except OSError as e:
            raise StateWriteError(self.path, str(e)) from None

        logger.info("Saved state ({} iterations): {}", len(state.iterations), self.path)
        return state

    def remove(self) -> bool:
        if not self.path.exists():
            logger.debug("No state file to remove at {}", self.path)
            return False

        try:
            with FileLock(self.lock_path):
                self.path.unlink(missing_ok=True)
        except OSError as e:
            raise StateWriteError(self.path, str(e)) from None
        logger.info("Removed state file: {}", self.path)
        return True

    def _normalize(self, raw: dict[str, Any]) -> RunState:
        now = self.clock()

        status_value = raw.get("status")
        if isinstance(status_value, str) and status_value in {s.value for s in LoopStatus}:
            status = LoopStatus(status_value)
        else:
            logger.warning("Unknown loop status {!r} in {}, using idle", status_value, self.path)
            status = LoopStatus.IDLE

        entries = raw.get("iterations")
        if not isinstance(entries, list):
            entries = []

        iterations: list[Iteration] = []
        for position, entry in enumerate(entries):
            try:
                iterations.append(Iteration.model_validate(entry))
            except ValidationError as e:
                logger.warning(
                    "Dropping malformed iteration entry #{} from {}: {} problem(s)",
                    position,
                    self.path,
                    e.error_count(),
                )

        return RunState(
            status=status,
            iterations=iterations,
            created_at=_parse_timestamp(raw.get("createdAt"), now),
            updated_at=_parse_timestamp(raw.get("updatedAt"), now),
        )
