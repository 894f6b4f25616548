"""Configuration for todo-cli.

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TODO_* prefix)
    3. Project config (./.todo_cli/settings.json)
    4. User config (~/.todo_cli/settings.json)
    5. .env file
    6. Default values

Settings are built once in the entry point and passed down explicitly;
there is no global settings instance.
"""

from pathlib import Path
from typing import Literal, Tuple, Type

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

APP_NAME = "todo_cli"
DEFAULT_TASKS_FILENAME = "todos.json"


def _get_json_config_source(
    settings_cls: Type[BaseSettings],
    json_file: Path,
) -> PydanticBaseSettingsSource | None:
    """Create a JSON config source if the file exists.

    Args:
        settings_cls: The settings class
        json_file: Path to JSON config file

    Returns:
        JsonConfigSettingsSource if file exists, None otherwise
    """
    if not json_file.is_file():
        return None
    return JsonConfigSettingsSource(settings_cls, json_file=json_file)


class TodoSettings(BaseSettings):
    """Settings for the to-do list manager."""

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(
        default_factory=lambda: Path.home() / f".{APP_NAME}",
        title="Data Directory",
        description="Per-user directory holding the task file",
    )
    tasks_filename: str = Field(
        default=DEFAULT_TASKS_FILENAME,
        title="Tasks Filename",
        description="Name of the JSON file inside data_dir",
    )
    storage_backend: Literal["file", "memory"] = Field(
        default="file",
        title="Storage Backend",
        description="'file' persists across runs, 'memory' lasts one session",
    )

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for dev, json for production)",
    )

    prompt_delay: float = Field(
        default=0.0,
        ge=0.0,
        title="Prompt Delay",
        description="Seconds to pause after each command before prompting again",
    )
    announce_unknown_commands: bool = Field(
        default=True,
        title="Announce Unknown Commands",
        description="Print a hint for unrecognized commands instead of ignoring them",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        return Path(v).expanduser()

    @field_validator("tasks_filename")
    @classmethod
    def plain_filename(cls, v: str) -> str:
        if not v or Path(v).name != v:
            raise ValueError("tasks_filename must be a plain file name")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Layer JSON config files between the environment and .env.

        Note: JSON sources are only included if the files exist.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        project_json = _get_json_config_source(
            settings_cls,
            Path.cwd() / f".{APP_NAME}" / "settings.json",
        )
        if project_json:
            sources.append(project_json)

        user_json = _get_json_config_source(
            settings_cls,
            Path.home() / f".{APP_NAME}" / "settings.json",
        )
        if user_json:
            sources.append(user_json)

        sources.append(dotenv_settings)

        return tuple(sources)

    @property
    def tasks_path(self) -> Path:
        """Full path of the task file."""
        return self.data_dir / self.tasks_filename
