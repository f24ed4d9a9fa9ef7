"""File persistence helpers."""

from todolist.persistence._utils import atomic_write_text, temp_path_for

__all__ = ["atomic_write_text", "temp_path_for"]
