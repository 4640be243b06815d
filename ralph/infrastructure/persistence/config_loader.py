import json
from pathlib import Path

from loguru import logger
from pydantic import ValidationError

from ralph.domain.entities.config import CONFIG_FILENAME, RalphConfig, default_config
from ralph.domain.errors import ConfigInvalidError, ConfigMissingError
from ralph.infrastructure.persistence.atomic_io import atomic_write


def config_path(root_dir: Path, filename: str = CONFIG_FILENAME) -> Path:
    return (root_dir / filename).resolve()


def _error_location(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as `checks[1].name`."""
    rendered = ""
    for part in loc:
        if isinstance(part, int):
            rendered += f"[{part}]"
        else:
            rendered += f".{part}" if rendered else part
    return rendered


def _describe_errors(error: ValidationError) -> list[str]:
    problems: list[str] = []
    for item in error.errors():
        msg = item.get("msg", "")
        # Clean up Pydantic message format
        if msg.startswith("Value error, "):
            msg = msg[13:]
        location = _error_location(tuple(item.get("loc", ())))
        problems.append(f"{location}: {msg}" if location else msg)
    return problems


def load_config(root_dir: Path, filename: str = CONFIG_FILENAME) -> RalphConfig:
    """Read and validate the config file. Nothing is coerced or repaired."""
    path = config_path(root_dir, filename)
    if not path.exists():
        raise ConfigMissingError(path)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigInvalidError(path, [f"not valid JSON ({e})"]) from None
    except OSError as e:
        raise ConfigInvalidError(path, [f"cannot be read ({e})"]) from None

    if not isinstance(raw, dict):
        raise ConfigInvalidError(path, ["top-level value must be a JSON object"])

    try:
        config = RalphConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigInvalidError(path, _describe_errors(e)) from None

    logger.debug("Loaded config {} ({} checks)", path, len(config.checks))
    return config


def write_default_config(root_dir: Path, filename: str = CONFIG_FILENAME) -> RalphConfig:
    """Write the default config unless one already exists.

    An existing file is loaded (and validated) instead, never overwritten.
    """
    path = config_path(root_dir, filename)
    if path.exists():
        return load_config(root_dir, filename)

    config = default_config()
    atomic_write(path, json.dumps(config.to_json_dict(), indent=2) + "\n")
    logger.info("Wrote default config: {}", path)
    return config
