"""Integration tests for config file loading."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from ralph.domain.entities.config import default_config
from ralph.domain.errors import ConfigInvalidError, ConfigMissingError
from ralph.infrastructure.persistence.config_loader import load_config, write_default_config

VALID = {"maxIterations": 2, "checks": [{"name": "pass", "command": "exit 0"}]}


class TestLoadConfig:
    def test_loads_and_defaults_optional_fields(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config(VALID)

        config = load_config(project_root)

        assert config.max_iterations == 2
        assert config.checks[0].command == "exit 0"
        assert config.state_file == ".ralph/state.json"
        assert config.stop_on_failure is True

    def test_custom_filename(self, project_root: Path, write_config: Callable[..., Path]) -> None:
        write_config(VALID, "other.json")

        assert load_config(project_root, "other.json").max_iterations == 2

    def test_missing_file(self, project_root: Path) -> None:
        with pytest.raises(ConfigMissingError, match="ralph.config.json"):
            load_config(project_root)

    def test_unparsable_json(self, project_root: Path) -> None:
        (project_root / "ralph.config.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigInvalidError, match="not valid JSON"):
            load_config(project_root)

    def test_non_utf8_file(self, project_root: Path) -> None:
        (project_root / "ralph.config.json").write_bytes(b'{"maxIterations": 1, "checks": [\xff]}')

        with pytest.raises(ConfigInvalidError, match="not valid JSON"):
            load_config(project_root)

    def test_unreadable_path(self, project_root: Path) -> None:
        (project_root / "ralph.config.json").mkdir()

        with pytest.raises(ConfigInvalidError, match="cannot be read"):
            load_config(project_root)

    def test_non_object_json(self, project_root: Path) -> None:
        (project_root / "ralph.config.json").write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ConfigInvalidError, match="JSON object"):
            load_config(project_root)

    def test_zero_max_iterations_mentions_field(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config({**VALID, "maxIterations": 0})

        with pytest.raises(ConfigInvalidError, match="maxIterations"):
            load_config(project_root)

    def test_missing_max_iterations_mentions_field(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config({"checks": VALID["checks"]})

        with pytest.raises(ConfigInvalidError, match="maxIterations"):
            load_config(project_root)

    def test_empty_checks(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config({**VALID, "checks": []})

        with pytest.raises(ConfigInvalidError, match="checks"):
            load_config(project_root)

    def test_names_check_index_missing_a_field(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config(
            {
                "maxIterations": 1,
                "checks": [{"name": "ok", "command": "true"}, {"command": "true"}],
            }
        )

        with pytest.raises(ConfigInvalidError) as exc_info:
            load_config(project_root)

        assert "checks[1].name" in str(exc_info.value)

    def test_lists_every_problem(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config({"maxIterations": -1, "checks": [{"name": "", "command": ""}]})

        with pytest.raises(ConfigInvalidError) as exc_info:
            load_config(project_root)

        assert len(exc_info.value.problems) == 3
        assert any(p.startswith("maxIterations") for p in exc_info.value.problems)
        assert any(p.startswith("checks[0].command") for p in exc_info.value.problems)


class TestWriteDefaultConfig:
    def test_writes_default_when_absent(self, project_root: Path) -> None:
        config = write_default_config(project_root)

        path = project_root / "ralph.config.json"
        assert path.exists()
        assert config == default_config()
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["maxIterations"] == 10
        assert [c["name"] for c in data["checks"]] == ["lint", "typecheck", "test", "smoke"]

    def test_never_overwrites_existing(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        path = write_config(VALID)
        before = path.read_text(encoding="utf-8")

        config = write_default_config(project_root)

        assert config.max_iterations == 2
        assert path.read_text(encoding="utf-8") == before

    def test_existing_invalid_config_is_reported(
        self, project_root: Path, write_config: Callable[[dict[str, Any]], Path]
    ) -> None:
        write_config({"maxIterations": 0, "checks": []})

        with pytest.raises(ConfigInvalidError):
            write_default_config(project_root)

    def test_written_file_loads_back(self, project_root: Path) -> None:
        write_default_config(project_root)

        assert load_config(project_root) == default_config()
