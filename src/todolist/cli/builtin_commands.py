"""Built-in commands for the todo CLI."""

from typing import TYPE_CHECKING

from rich.padding import Padding
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from todolist.cli.commands import Command, CommandCategory
from todolist.cli.styles import (
    ARG_STYLE,
    CMD_STYLE,
    DESC_STYLE,
    HEADER_STYLE,
    MUTED_STYLE,
    PRIMARY,
    PROMPT_STYLE,
    TITLE_STYLE,
    task_line,
)
from todolist.exceptions import CommandError, TaskNotFoundError

if TYPE_CHECKING:
    from todolist.cli.app import TodoApp


class AddCommand(Command):
    """Add a new task."""

    def __init__(self) -> None:
        super().__init__(
            name="add",
            description="Add a new task",
            aliases=["a"],
            usage="<description>",
            examples=['"Buy groceries"'],
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        if not args:
            raise CommandError(
                "'add' requires a task description",
                usage=f'{app.app_name} add "<description>"',
            )

        tasks = app.operations.add(" ".join(args))
        task = tasks[-1]
        app.print_success(f"✓ Task added (ID: {task.id}): {task.description}")
        return 0


class ViewCommand(Command):
    """List all tasks in file order."""

    def __init__(self) -> None:
        super().__init__(
            name="view",
            description="List all current tasks",
            aliases=["v"],
            examples=[""],
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        tasks = app.operations.list_tasks()
        if not tasks:
            app.print_info("No tasks yet. Use 'add' to create one.")
            return 0
        for task in tasks:
            app.console.print(task_line(task))
        return 0


class MarkDoneCommand(Command):
    """Mark a task as completed."""

    def __init__(self) -> None:
        super().__init__(
            name="markdone",
            description="Mark a task as completed",
            aliases=["m"],
            usage="<id>",
            examples=["2"],
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        task_id = self.require_id(args, app.app_name)
        task = app.operations.mark_done(task_id)
        app.print_success(f"✓ Task {task.id} marked as done: {task.description}")
        return 0


class DeleteCommand(Command):
    """Delete a task, asking for confirmation first."""

    def __init__(self) -> None:
        super().__init__(
            name="delete",
            description="Delete a task permanently",
            aliases=["x"],
            usage="<id> [--yes]",
            flags=frozenset({"yes", "y"}),
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        task_id = self.require_id(args, app.app_name)
        skip_prompt = self.parse_args(args).has_flag("yes", "y")

        if app.settings.confirm_delete and not skip_prompt:
            task = app.operations.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            question = Text.assemble(
                ("?", PROMPT_STYLE),
                " Are you sure you want to delete '",
                (task.description, ARG_STYLE),
                "'? ",
                ("(y/N)", MUTED_STYLE),
                " ",
            )
            if not app.confirm(question):
                app.print_info("Deletion cancelled.")
                return 0

        task = app.operations.delete(task_id)
        app.print_success(f"✓ Task {task.id} deleted: {task.description}")
        return 0


class HelpCommand(Command):
    """Display full usage information."""

    def __init__(self) -> None:
        super().__init__(
            name="--help",
            description="Show this help message",
            aliases=["-h"],
            category=CommandCategory.OPTIONS,
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        console = app.console
        name = app.app_name

        console.print(Text(f" {name} v{app.version} ", style=TITLE_STYLE))
        console.print(Text("A lightweight terminal task manager for focused developers.", style=DESC_STYLE))

        console.print()
        console.print(Text("USAGE:", style=HEADER_STYLE))
        console.print(
            Text.assemble("  ", (name, CMD_STYLE), " ", ("[command]", ARG_STYLE), " ", ("[arguments]", MUTED_STYLE))
        )

        commands = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        commands.add_column("Command", style=CMD_STYLE, no_wrap=True)
        commands.add_column("Arguments", style=ARG_STYLE, no_wrap=True)
        commands.add_column("Description", style=MUTED_STYLE)
        for cmd in app.registry.by_category(CommandCategory.TASKS):
            commands.add_row(", ".join([cmd.name, *cmd.aliases]), cmd.usage, cmd.description)

        options = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        options.add_column("Option", style=CMD_STYLE, no_wrap=True)
        options.add_column("Description", style=MUTED_STYLE)
        for cmd in app.registry.by_category(CommandCategory.OPTIONS):
            options.add_row(", ".join([*cmd.aliases, cmd.name]), cmd.description)

        for title, table in (("COMMANDS:", commands), ("OPTIONS:", options)):
            console.print()
            console.print(Text(title, style=HEADER_STYLE))
            console.print(Padding(table, (0, 0, 0, 2)))

        console.print(Text("EXAMPLES:", style=HEADER_STYLE))
        for cmd in app.registry.by_category(CommandCategory.TASKS):
            for example in cmd.examples:
                line = " ".join(part for part in (name, cmd.name, example) if part)
                console.print(Text(f"  {line}"))
        console.print()
        return 0


class ListCommand(Command):
    """Display a compact command summary."""

    def __init__(self) -> None:
        super().__init__(
            name="--list",
            description="Show command summary",
            aliases=["-l"],
            category=CommandCategory.OPTIONS,
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        table = Table(show_header=False, box=None, padding=(0, 2, 0, 0))
        table.add_column("Command", style=CMD_STYLE, no_wrap=True)
        table.add_column("Description", style=MUTED_STYLE)
        for cmd in app.registry.by_category(CommandCategory.TASKS):
            syntax = " ".join(part for part in (", ".join([cmd.name, *cmd.aliases]), cmd.usage) if part)
            table.add_row(syntax, cmd.description)
        table.add_row("-h, --help", "Show full help")

        app.console.print(
            Panel(
                table,
                title=Text(f"{app.app_name} - Available Commands", style="bold"),
                border_style=PRIMARY,
                expand=False,
            )
        )
        app.print_info(f"Run '{app.app_name} --help' for full documentation.")
        return 0


class VersionCommand(Command):
    """Display the version string."""

    def __init__(self) -> None:
        super().__init__(
            name="--version",
            description="Show version information",
            aliases=["-V"],
            category=CommandCategory.OPTIONS,
        )

    def execute(self, args: list[str], app: "TodoApp") -> int:
        app.console.print(
            Text.assemble((app.app_name, CMD_STYLE), " version ", (app.version, ARG_STYLE))
        )
        return 0


BUILTIN_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    ViewCommand,
    MarkDoneCommand,
    DeleteCommand,
    HelpCommand,
    ListCommand,
    VersionCommand,
)
