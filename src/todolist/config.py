"""Configuration for the todo CLI.

Settings Loading Priority (highest to lowest):
    1. Constructor arguments
    2. Environment variables (TODO_* prefix)
    3. User config (~/.todolist/settings.json)
    4. .env file
    5. Default values

The resolved settings are passed explicitly to the store and the app;
get_settings() only exists for the process entry point.
"""

from pathlib import Path
from typing import Tuple, Type

from pydantic_settings import (
    BaseSettings,
    JsonConfigSettingsSource,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from todolist.settings_mixins import (
    CLISettingsMixin,
    StorageSettingsMixin,
    default_data_dir,
)

__all__ = [
    "TodoSettings",
    "get_settings",
    "set_settings",
    "reload_settings",
    "user_config_path",
]


def user_config_path() -> Path:
    """Location of the optional user-level JSON config file."""
    return default_data_dir() / "settings.json"


class TodoSettings(StorageSettingsMixin, CLISettingsMixin, BaseSettings):
    """Settings for the todo CLI.

    Mixins provide organized settings:
    - StorageSettingsMixin: App name and storage location
    - CLISettingsMixin: Logging and prompt behaviour
    """

    model_config = SettingsConfigDict(
        env_prefix="TODO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Insert the user JSON config between env vars and .env.

        The JSON source is only included if the file exists.
        """
        sources: list[PydanticBaseSettingsSource] = [
            init_settings,
            env_settings,
        ]

        json_file = user_config_path()
        if json_file.is_file():
            sources.append(JsonConfigSettingsSource(settings_cls, json_file=json_file))

        sources.append(dotenv_settings)
        return tuple(sources)


# Global settings instance holder
_settings_instance: TodoSettings | None = None


def get_settings() -> TodoSettings:
    """Get the process-wide settings, creating them on first access."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = TodoSettings()
    return _settings_instance


def set_settings(settings: TodoSettings) -> None:
    """Set the process-wide settings instance.

    Args:
        settings: Settings instance to use globally
    """
    global _settings_instance
    _settings_instance = settings


def reload_settings() -> TodoSettings:
    """Drop the cached instance and build fresh settings."""
    global _settings_instance
    _settings_instance = None
    return get_settings()
