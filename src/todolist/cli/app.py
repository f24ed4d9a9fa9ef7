"""CLI application for the todo tool.

This module provides the application object that:
1. Resolves settings and configures logging
2. Builds the record store and task operations for the configured path
3. Dispatches the first argument to a registered command and maps
   expected failures to exit code 1
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from todolist import __version__
from todolist.cli.builtin_commands import BUILTIN_COMMANDS
from todolist.cli.commands import Command, CommandRegistry
from todolist.cli.styles import CMD_STYLE, ERROR_STYLE, MUTED_STYLE, SUCCESS_STYLE, TITLE_STYLE
from todolist.config import TodoSettings, get_settings
from todolist.exceptions import CommandError, TodoError
from todolist.logging import Loggers, bind_context, clear_context, configure_logging
from todolist.tasks import RecordStore, TaskOperations


class TodoApp:
    """The todo command-line application.

    Example:
        >>> app = TodoApp(TodoSettings(data_dir=tmp_dir))
        >>> app.run(["add", "Buy milk"])
        0
    """

    def __init__(
        self,
        settings: TodoSettings | None = None,
        console: Console | None = None,
    ) -> None:
        self._settings = settings if settings is not None else get_settings()
        configure_logging(self._settings)
        self._logger = Loggers.cli()

        self.console = console if console is not None else Console(highlight=False)
        self.store = RecordStore(self._settings.storage_path)
        self.operations = TaskOperations(self.store)

        self.registry = CommandRegistry()
        for command_cls in BUILTIN_COMMANDS:
            self.register_command(command_cls())

    @property
    def settings(self) -> TodoSettings:
        return self._settings

    @property
    def app_name(self) -> str:
        return self._settings.app_name

    @property
    def version(self) -> str:
        return __version__

    def register_command(self, command: Command) -> None:
        """Register an additional command."""
        self.registry.register(command)

    # -- output helpers -------------------------------------------------

    def print_success(self, message: str) -> None:
        self.console.print(Text(f" {message}", style=SUCCESS_STYLE))

    def print_error(self, message: str) -> None:
        self.console.print(Text(f" {message}", style=ERROR_STYLE))

    def print_info(self, message: str) -> None:
        self.console.print(Text(f" {message}", style=MUTED_STYLE))

    def confirm(self, question: Text | str) -> bool:
        """Ask a y/N question; anything but "y" or "Y" means no."""
        try:
            answer = self.console.input(question)
        except EOFError:
            answer = ""
        return answer.strip() in ("y", "Y")

    # -- dispatch -------------------------------------------------------

    def _print_banner(self) -> None:
        self.console.print(Text(f" {self.app_name} v{self.version} ", style=TITLE_STYLE))
        self.print_info("Your Personal Task Manager")
        self.print_info("Type -h or --help for instructions")
        self.console.print()
        self.print_error("No command provided.")

    def run(self, argv: list[str]) -> int:
        """Run one command.

        Args:
            argv: Arguments after the program name.

        Returns:
            Process exit code (0 on success, 1 on any reported failure).
        """
        if not argv:
            self._print_banner()
            return 0

        name, args = argv[0], argv[1:]
        command = self.registry.get(name)
        if command is None:
            self._logger.debug("unknown_command", command=name)
            self.print_error(f"Error: unknown command '{name}'")
            self.console.print(
                Text.assemble(
                    "\nRun '",
                    (f"{self.app_name} --list", CMD_STYLE),
                    "' to see available commands.",
                )
            )
            return 1

        bind_context(command=command.name)
        try:
            return command.execute(args, self)
        except CommandError as e:
            self.print_error(f"Error: {e}")
            if e.usage:
                self.console.print(Text.assemble("\nUsage:\n  ", (e.usage, CMD_STYLE)))
            return 1
        except TodoError as e:
            self.print_error(f"Error: {e}")
            return 1
        finally:
            clear_context()
