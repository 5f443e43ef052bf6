"""Infrastructure layer for task execution."""

from parallel_tasks.executor.infrastructure.parallel_tasks import ParallelTasks, invoke_handler

__all__ = ["ParallelTasks", "invoke_handler"]
