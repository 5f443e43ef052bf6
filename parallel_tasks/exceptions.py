"""
Exceptions raised by the parallel tasks engine.
"""


class ParallelTasksError(Exception):
    """Base class for all engine errors."""


class NoTasksFoundError(ParallelTasksError, LookupError):
    """Raised by ``execute`` when no handler is registered under a task name."""

    def __init__(self, task_name: str) -> None:
        super().__init__(f"No tasks found for '{task_name}'")
        self.task_name = task_name


class ModuleLoadError(ParallelTasksError, ImportError):
    """Raised when a discovered file cannot be loaded as a module."""

    def __init__(self, path: str, reason: BaseException | str) -> None:
        if isinstance(reason, BaseException):
            reason = f"{type(reason).__name__}: {reason}"
        super().__init__(f"Failed to load module from '{path}': {reason}", path=path)
        self.reason = reason
