"""
Task registration model.
Stores one (task name, handler) pair.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class TaskRegistration:
    """
    A handler registered under a task name.

    Several registrations may share the same task name; together they form
    the group that ``execute`` fans out to.

    Attributes:
        task_name: Case-sensitive group key.
        target: Handler captured at registration time. It is not validated
            here; a non-callable target fails when it is invoked.
    """

    task_name: str
    target: Callable[..., Any] | Any

    def __post_init__(self) -> None:
        """Validate registration."""
        if not isinstance(self.task_name, str) or not self.task_name:
            raise ValueError("Task name must be a non-empty string")

    def describe(self) -> str:
        """Human readable name of the target, used in log messages."""
        return getattr(self.target, "__qualname__", None) or repr(self.target)
