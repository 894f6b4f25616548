"""Tests for configuration module."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from todo_cli.config import TodoSettings
from todo_cli.models import Task
from todo_cli.store import FileStore


class TestTodoSettings:
    """Tests for TodoSettings class."""

    def test_default_values(self, data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings(data_dir=data_dir)

        assert settings.tasks_filename == "todos.json"
        assert settings.storage_backend == "file"
        assert settings.log_level == "warning"
        assert settings.log_format == "console"
        assert settings.prompt_delay == 0.0
        assert settings.announce_unknown_commands is True

    def test_default_data_dir_is_per_user(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings()

        assert settings.data_dir == Path.home() / ".todo_cli"

    def test_tasks_path(self, data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings(data_dir=data_dir, tasks_filename="mine.json")

        assert settings.tasks_path == data_dir / "mine.json"

    def test_data_dir_path_expansion(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings(data_dir="~/todo_test_data")

        assert not str(settings.data_dir).startswith("~")
        assert settings.data_dir == Path.home() / "todo_test_data"

    def test_data_dir_is_created_by_first_save(self, data_dir: Path):
        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings(data_dir=data_dir / "nested")

        assert not settings.data_dir.exists()

        result = FileStore(settings.tasks_path).save([Task.create("buy milk")])

        assert result.ok is True
        assert settings.tasks_path.is_file()

    def test_only_consumed_fields(self):
        assert set(TodoSettings.model_fields) == {
            "data_dir",
            "tasks_filename",
            "storage_backend",
            "log_level",
            "log_format",
            "prompt_delay",
            "announce_unknown_commands",
        }


class TestEnvironment:
    def test_env_overrides(self, data_dir: Path):
        env = {
            "TODO_DATA_DIR": str(data_dir),
            "TODO_STORAGE_BACKEND": "memory",
            "TODO_LOG_LEVEL": "debug",
            "TODO_PROMPT_DELAY": "1.5",
            "TODO_ANNOUNCE_UNKNOWN_COMMANDS": "false",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = TodoSettings()

        assert settings.data_dir == data_dir
        assert settings.storage_backend == "memory"
        assert settings.log_level == "debug"
        assert settings.prompt_delay == 1.5
        assert settings.announce_unknown_commands is False

    def test_init_beats_env(self, data_dir: Path):
        with patch.dict(os.environ, {"TODO_STORAGE_BACKEND": "memory"}, clear=True):
            settings = TodoSettings(data_dir=data_dir, storage_backend="file")

        assert settings.storage_backend == "file"


class TestValidation:
    @pytest.mark.parametrize(
        "overrides",
        [
            {"storage_backend": "sqlite"},
            {"log_level": "verbose"},
            {"prompt_delay": -1},
            {"tasks_filename": "../escape.json"},
            {"tasks_filename": ""},
        ],
    )
    def test_invalid_values(self, data_dir: Path, overrides: dict):
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(ValidationError):
                TodoSettings(data_dir=data_dir, **overrides)


class TestJsonConfig:
    def test_project_settings_file(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / ".todo_cli"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(
            json.dumps({"storage_backend": "memory", "prompt_delay": 2})
        )
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {}, clear=True):
            settings = TodoSettings(data_dir=tmp_path / "data")

        assert settings.storage_backend == "memory"
        assert settings.prompt_delay == 2.0

    def test_env_beats_project_settings_file(self, tmp_path: Path, monkeypatch):
        config_dir = tmp_path / ".todo_cli"
        config_dir.mkdir()
        (config_dir / "settings.json").write_text(json.dumps({"storage_backend": "memory"}))
        monkeypatch.chdir(tmp_path)

        with patch.dict(os.environ, {"TODO_STORAGE_BACKEND": "file"}, clear=True):
            settings = TodoSettings(data_dir=tmp_path / "data")

        assert settings.storage_backend == "file"
