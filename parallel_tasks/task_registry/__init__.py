"""
Task Registry System.

Provides the process-wide metadata registry and the ``@register_task`` decorator.
"""

from parallel_tasks.task_registry.decorator import (
    TaskMember,
    clear_registry,
    get_registry,
    register_task,
    register_tasks,
    reset_registry,
)
from parallel_tasks.task_registry.domain import RegistryPort, TaskRegistration
from parallel_tasks.task_registry.infrastructure import MetadataRegistry

__all__ = [
    # Decorator
    "register_task",
    "register_tasks",
    "TaskMember",
    "get_registry",
    "reset_registry",
    "clear_registry",
    # Domain
    "TaskRegistration",
    "RegistryPort",
    # Infrastructure
    "MetadataRegistry",
]
