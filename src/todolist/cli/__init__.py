"""Command-line interface for the todo tool."""

from todolist.cli.app import TodoApp
from todolist.cli.commands import (
    Command,
    CommandCategory,
    CommandRegistry,
    ParsedArgs,
)

__all__ = [
    "Command",
    "CommandCategory",
    "CommandRegistry",
    "ParsedArgs",
    "TodoApp",
]
