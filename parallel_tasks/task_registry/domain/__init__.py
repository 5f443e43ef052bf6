"""Domain layer for task registry."""

from parallel_tasks.task_registry.domain.registry_port import RegistryPort
from parallel_tasks.task_registry.domain.task_model import TaskRegistration

__all__ = ["TaskRegistration", "RegistryPort"]
