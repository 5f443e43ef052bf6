"""Executor domain models."""

from parallel_tasks.executor.domain.options import ParallelTasksOptions
from parallel_tasks.executor.domain.parallel_tasks_port import ParallelTasksPort

__all__ = ["ParallelTasksOptions", "ParallelTasksPort"]
