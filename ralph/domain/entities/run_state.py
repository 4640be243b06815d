from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from ralph.domain.value_objects import CheckStatus, IterationStatus, LoopStatus


def utc_now() -> datetime:
    return datetime.now(UTC)


class CheckResult(BaseModel):
    """Outcome of one configured check within one iteration.

    `name` and `command` are copied from the config when the check runs, so
    later config edits do not rewrite history.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr
    command: StrictStr
    status: CheckStatus
    exit_code: StrictInt | None = Field(alias="exitCode")
    started_at: datetime = Field(alias="startedAt")
    finished_at: datetime = Field(alias="finishedAt")
    duration_ms: StrictInt = Field(alias="durationMs", ge=0)


class Iteration(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index: StrictInt = Field(ge=1)
    started_at: datetime = Field(alias="startedAt")
    finished_at: datetime = Field(alias="finishedAt")
    status: IterationStatus
    checks: list[CheckResult]


class RunState(BaseModel):
    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    status: LoopStatus = LoopStatus.IDLE
    iterations: list[Iteration] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now, alias="createdAt")
    updated_at: datetime = Field(default_factory=utc_now, alias="updatedAt")

    def add_iteration(self, iteration: Iteration) -> None:
        self.iterations.append(iteration)

    def latest_iteration(self) -> Iteration | None:
        return self.iterations[-1] if self.iterations else None

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def create_initial_state(now: datetime | None = None) -> RunState:
    timestamp = now or utc_now()
    return RunState(
        status=LoopStatus.IDLE,
        iterations=[],
        created_at=timestamp,
        updated_at=timestamp,
    )
