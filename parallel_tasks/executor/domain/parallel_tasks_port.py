"""
Parallel tasks interface.
What callers need in order to fan a task out to its handlers.
"""

from abc import ABC, abstractmethod
from typing import Any


class ParallelTasksPort(ABC):
    """
    Interface for executing every handler registered under a task name.
    """

    @abstractmethod
    async def execute(self, task_name: str, context: Any) -> list[Any]:
        """
        Execute all handlers registered under a task name concurrently.

        Handler failures do not propagate: the raised exception takes the
        handler's slot in the result list. Results follow registration order,
        not completion order. ``context`` is shared by reference between all
        handlers.

        Args:
            task_name: Case-sensitive task name.
            context: Sole argument passed to every handler.

        Returns:
            One return value or exception per handler.

        Raises:
            NoTasksFoundError: If no handler is registered under ``task_name``.
        """
        ...
