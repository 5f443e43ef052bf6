"""Executor module for fanning a task out to its registered handlers."""

from parallel_tasks.executor.domain import ParallelTasksOptions, ParallelTasksPort
from parallel_tasks.executor.infrastructure import ParallelTasks

__all__ = [
    "ParallelTasks",
    "ParallelTasksOptions",
    "ParallelTasksPort",
]
