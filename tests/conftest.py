"""Shared test fixtures and utilities for todolist tests.

Provides:
- MockContext for isolating tests from global settings and TODO_* env vars
- A recording rich console for asserting on CLI output
- Store / operations fixtures rooted in a temporary directory
"""

import io
import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest
import structlog
from rich.console import Console

from todolist.cli.app import TodoApp
from todolist.config import TodoSettings, reload_settings, set_settings
from todolist.tasks import RecordStore, TaskOperations


def make_console() -> Console:
    """Plain-text console writing to an in-memory buffer."""
    return Console(
        file=io.StringIO(),
        width=200,
        color_system=None,
        force_terminal=False,
        highlight=False,
    )


def console_output(console: Console) -> str:
    return console.file.getvalue()


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Hiding TODO_* environment variables
    - Providing a temporary data directory
    - Resetting the global settings singleton afterwards

    Usage:
        with MockContext(confirm_delete=False) as ctx:
            app = ctx.app()
            app.run(["add", "Buy milk"])
    """

    def __init__(self, **settings_kwargs) -> None:
        self._settings_kwargs = settings_kwargs
        self._temp_dir: tempfile.TemporaryDirectory | None = None
        self._settings: TodoSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        self._temp_dir = tempfile.TemporaryDirectory()

        for var in list(os.environ):
            if var.startswith("TODO_"):
                self._original_env[var] = os.environ.pop(var)

        self._settings = TodoSettings(
            data_dir=Path(self._temp_dir.name) / "data",
            **self._settings_kwargs,
        )
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        os.environ.update(self._original_env)
        reload_settings()
        if self._temp_dir:
            self._temp_dir.cleanup()

    @property
    def settings(self) -> TodoSettings:
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings

    @property
    def storage_path(self) -> Path:
        return self.settings.storage_path

    def app(self, console: Console | None = None) -> TodoApp:
        """Build an app on the isolated settings with a recording console."""
        return TodoApp(self.settings, console=console or make_console())


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Undo any logging configuration done by the app under test."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def no_confirm_context() -> Generator[MockContext, None, None]:
    """Isolated context with the delete confirmation prompt disabled."""
    with MockContext(confirm_delete=False) as ctx:
        yield ctx


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing task file."""
    return tmp_path / "todo" / "storage.csv"


@pytest.fixture
def store(storage_path: Path) -> RecordStore:
    return RecordStore(storage_path)


@pytest.fixture
def operations(store: RecordStore) -> TaskOperations:
    return TaskOperations(store)
