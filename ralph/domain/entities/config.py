import math
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
)

CONFIG_FILENAME = "ralph.config.json"

DEFAULT_TASK_FILE = "TASK.md"
DEFAULT_PHASES_FILE = "PHASES.md"
DEFAULT_STATE_FILE = ".ralph/state.json"
DEFAULT_MAX_ITERATIONS = 10


class CheckDefinition(BaseModel):
    """A named shell command whose exit code decides pass or fail."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: StrictStr
    command: StrictStr
    # Opt-in; None means the check may run forever.
    timeout_seconds: float | None = Field(default=None, alias="timeoutSeconds")

    @field_validator("name", "command")
    @classmethod
    def validate_not_blank(cls, v: str, info: ValidationInfo) -> str:
        if not v.strip():
            raise ValueError(f"{info.field_name} must be a non-empty string")
        return v

    @field_validator("timeout_seconds", mode="before")
    @classmethod
    def validate_timeout(cls, v: Any) -> Any:
        if v is None:
            return v
        if isinstance(v, bool) or not isinstance(v, int | float):
            raise ValueError("timeoutSeconds must be a positive number")
        if not math.isfinite(v) or v <= 0:
            raise ValueError("timeoutSeconds must be a positive number")
        return float(v)


class RalphConfig(BaseModel):
    """Contents of ralph.config.json.

    `maxIterations` and `checks` are required; the remaining fields fall back
    to defaults. Scalars are strict so hand-written mistakes are rejected
    instead of coerced. Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    max_iterations: StrictInt = Field(alias="maxIterations")
    checks: list[CheckDefinition]
    task_file: StrictStr = Field(default=DEFAULT_TASK_FILE, alias="taskFile")
    phases_file: StrictStr = Field(default=DEFAULT_PHASES_FILE, alias="phasesFile")
    state_file: StrictStr = Field(default=DEFAULT_STATE_FILE, alias="stateFile")
    stop_on_failure: StrictBool = Field(default=True, alias="stopOnFailure")

    @field_validator("max_iterations")
    @classmethod
    def validate_max_iterations(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("maxIterations must be a positive integer")
        return v

    @field_validator("checks")
    @classmethod
    def validate_checks(cls, v: list[CheckDefinition]) -> list[CheckDefinition]:
        if not v:
            raise ValueError("checks must contain at least one check")
        return v

    @field_validator("state_file")
    @classmethod
    def validate_state_file(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("stateFile must be a non-empty string")
        return v

    def to_json_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def default_config() -> RalphConfig:
    return RalphConfig(
        max_iterations=DEFAULT_MAX_ITERATIONS,
        checks=[
            CheckDefinition(name="lint", command="ruff check ."),
            CheckDefinition(name="typecheck", command="mypy ."),
            CheckDefinition(name="test", command="pytest -q"),
            CheckDefinition(name="smoke", command="pytest -q -m smoke"),
        ],
    )
