"""Command registry and base command class.

Commands are looked up by the first command-line argument (name or
alias) and receive the remaining arguments.

Example of creating a custom command:

    from todolist.cli.commands import Command, CommandCategory

    class ClearCommand(Command):
        '''Remove completed tasks.'''

        def __init__(self):
            super().__init__(
                name="clear",
                description="Remove completed tasks",
                aliases=["c"],
                category=CommandCategory.TASKS,
            )

        def execute(self, args: list[str], app: TodoApp) -> int:
            ...
            return 0
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from todolist.exceptions import CommandError

if TYPE_CHECKING:
    from todolist.cli.app import TodoApp


class CommandCategory(Enum):
    """Categories for organizing commands in help output."""

    TASKS = "tasks"
    OPTIONS = "options"


@dataclass
class ParsedArgs:
    """Parsed command arguments.

    Provides easy access to positional arguments and options.
    """

    positional: list[str] = field(default_factory=list)
    """Positional arguments (everything not an option)."""

    options: dict[str, str] = field(default_factory=dict)
    """Named options (--key=value or --flag)."""

    def has_flag(self, *names: str) -> bool:
        """Check if any of the given flag names is present."""
        return any(name in self.options for name in names)


class Command(ABC):
    """Base class for CLI commands.

    Subclass this and override execute(), which returns the process
    exit code.
    """

    def __init__(
        self,
        name: str,
        description: str,
        aliases: list[str] | None = None,
        usage: str | None = None,
        examples: list[str] | None = None,
        category: CommandCategory = CommandCategory.TASKS,
        flags: frozenset[str] = frozenset(),
    ) -> None:
        """Initialize the command.

        Args:
            name: Command name as typed on the command line
            description: Short description of what the command does
            aliases: Alternative names for the command
            usage: Argument syntax shown in help (e.g., "<id>")
            examples: List of example argument strings
            category: Category for organizing in help
            flags: Option names that never take a value (e.g., {"yes", "y"})
        """
        self.name = name
        self.description = description
        self.aliases = aliases or []
        self.usage = usage or ""
        self.examples = examples or []
        self.category = category
        self.flags = flags

    @abstractmethod
    def execute(self, args: list[str], app: "TodoApp") -> int:
        """Execute the command with given arguments.

        Args:
            args: Command-line arguments after the command name
            app: The CLI application instance

        Returns:
            Process exit code
        """

    def parse_args(self, args: list[str]) -> ParsedArgs:
        """Parse command arguments into structured form.

        Parses options in the forms:
        - --key=value
        - --key value
        - --flag / -f (boolean flag, for names in self.flags)

        Everything else, and everything after a bare "--", is positional.
        """
        options: dict[str, str] = {}
        positional: list[str] = []

        i = 0
        while i < len(args):
            part = args[i]

            if part == "--":
                positional.extend(args[i + 1 :])
                break
            elif part.startswith("--") and len(part) > 2:
                key = part[2:]
                if "=" in key:
                    key, value = key.split("=", 1)
                    options[key] = value
                elif key not in self.flags and i + 1 < len(args) and not args[i + 1].startswith("-"):
                    options[key] = args[i + 1]
                    i += 1
                else:
                    options[key] = "true"
            elif part.startswith("-") and len(part) == 2 and not part[1].isdigit():
                key = part[1]
                if key not in self.flags and i + 1 < len(args) and not args[i + 1].startswith("-"):
                    options[key] = args[i + 1]
                    i += 1
                else:
                    options[key] = "true"
            else:
                positional.append(part)

            i += 1

        return ParsedArgs(positional=positional, options=options)

    def usage_line(self, app_name: str) -> str:
        """Full usage line, e.g. ``todo delete <id>``."""
        return " ".join(part for part in (app_name, self.name, self.usage) if part)

    def require_id(self, args: list[str], app_name: str) -> int:
        """Parse the task id from the first positional argument.

        Raises:
            CommandError: If the id is missing or not a number.
        """
        parsed = self.parse_args(args)
        if not parsed.positional:
            raise CommandError(
                f"'{self.name}' requires a task ID", usage=self.usage_line(app_name)
            )
        raw = parsed.positional[0]
        try:
            return int(raw)
        except ValueError:
            raise CommandError(
                f"Invalid task ID '{raw}' - must be a number",
                usage=self.usage_line(app_name),
            ) from None


class CommandRegistry:
    """Registry for managing commands.

    Handles command registration and lookup by name or alias.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._categories: dict[CommandCategory, list[Command]] = {
            cat: [] for cat in CommandCategory
        }

    def register(self, command: Command) -> None:
        """Register a command and its aliases.

        Args:
            command: Command instance to register
        """
        previous = self._commands.get(command.name)
        if previous is not None and previous in self._categories[previous.category]:
            self._categories[previous.category].remove(previous)

        self._commands[command.name] = command
        for alias in command.aliases:
            self._commands[alias] = command

        if command not in self._categories[command.category]:
            self._categories[command.category].append(command)

    def get(self, name: str) -> Command | None:
        """Get a command by name or alias.

        Args:
            name: Command name or alias

        Returns:
            Command if found, None otherwise
        """
        return self._commands.get(name)

    def by_category(self, category: CommandCategory) -> list[Command]:
        """Get commands in a specific category.

        Args:
            category: Category to filter by

        Returns:
            List of commands in the category
        """
        return self._categories.get(category, [])
