"""Settings mixins for storage layout and CLI behaviour.

StorageSettingsMixin: Application identity and where the task file lives.
CLISettingsMixin: Logging and interactive prompt settings.

These live outside cli/ so that config.py can compose TodoSettings
without importing the cli package.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator

DEFAULT_DATA_DIRNAME = ".todolist"
FALLBACK_DATA_DIR = Path("storage")


def default_data_dir() -> Path:
    """Per-user data directory, or ./storage when HOME cannot be resolved."""
    try:
        return Path.home() / DEFAULT_DATA_DIRNAME
    except (RuntimeError, KeyError):
        return FALLBACK_DATA_DIR


class StorageSettingsMixin:
    """Settings for application identity and disk layout.

    Should be composed with BaseSettings via multiple inheritance.
    """

    app_name: str = Field(
        default="todo",
        title="App Name",
        description="Program name shown in help and version output",
    )

    data_dir: Path = Field(
        default_factory=default_data_dir,
        title="Data Directory",
        description="Directory holding the task file",
    )

    storage_filename: str = Field(
        default="storage.csv",
        title="Storage File",
        description="Name of the CSV file inside the data directory",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand ~ in paths."""
        if isinstance(v, str):
            return Path(v).expanduser()
        return v

    @property
    def storage_path(self) -> Path:
        """Full path of the task file."""
        return self.data_dir / self.storage_filename


class CLISettingsMixin:
    """Settings for CLI configuration.

    Note: This is a mixin, not a BaseSettings subclass, to avoid
    MRO issues when composed with other settings classes.
    """

    log_level: Literal["debug", "info", "warning", "error"] = Field(
        default="warning",
        title="Log Level",
        description="Logging verbosity level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        title="Log Format",
        description="Log output format (console for humans, json for tooling)",
    )

    confirm_delete: bool = Field(
        default=True,
        title="Confirm Delete",
        description="Ask for y/N confirmation before deleting a task",
    )
