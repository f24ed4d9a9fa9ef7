"""Rich style strings shared by the CLI output."""

from rich.text import Text

from todolist.tasks.models import TaskItem

PRIMARY = "#7D56F4"
SECONDARY = "#04B575"
ERROR = "#FF5F87"
GRAY = "#767676"

TITLE_STYLE = f"bold #FFFDF5 on {PRIMARY}"
HEADER_STYLE = f"bold {PRIMARY}"
DESC_STYLE = f"italic {GRAY}"
CMD_STYLE = f"bold {SECONDARY}"
ARG_STYLE = "#FAFAFA"
MUTED_STYLE = GRAY
SUCCESS_STYLE = f"bold {SECONDARY}"
ERROR_STYLE = f"bold {ERROR}"
PROMPT_STYLE = f"bold {PRIMARY}"

DONE_MARK = "✓"


def task_line(task: TaskItem) -> Text:
    """Render one task as ``[✓] 3. description`` (blank mark if pending)."""
    mark = (DONE_MARK, SUCCESS_STYLE) if task.is_completed else " "
    return Text.assemble(
        "[",
        mark,
        "] ",
        (f"{task.id}.", "bold"),
        " ",
        (task.description, MUTED_STYLE if task.is_completed else ""),
    )
