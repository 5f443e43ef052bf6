"""
Parallel Tasks.

Register handlers under shared task names, discover them from files, and run
every handler for a name concurrently with per-handler failure isolation.
"""

from parallel_tasks.exceptions import ModuleLoadError, NoTasksFoundError, ParallelTasksError
from parallel_tasks.executor import ParallelTasks, ParallelTasksOptions, ParallelTasksPort
from parallel_tasks.loader import LoadedModule, ModuleFormat
from parallel_tasks.task_registry import (
    MetadataRegistry,
    TaskRegistration,
    get_registry,
    register_task,
    register_tasks,
    reset_registry,
)

__all__ = [
    # Engine
    "ParallelTasks",
    "ParallelTasksOptions",
    "ParallelTasksPort",
    # Registration
    "register_task",
    "register_tasks",
    "get_registry",
    "reset_registry",
    "MetadataRegistry",
    "TaskRegistration",
    # Loading
    "LoadedModule",
    "ModuleFormat",
    # Errors
    "ParallelTasksError",
    "NoTasksFoundError",
    "ModuleLoadError",
]
