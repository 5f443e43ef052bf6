"""
Metadata registry implementation.
Stores task registrations in insertion order.
"""

import logging
from collections.abc import Iterator
from typing import Any

from parallel_tasks.task_registry.domain.registry_port import RegistryPort
from parallel_tasks.task_registry.domain.task_model import TaskRegistration

logger = logging.getLogger(__name__)


class MetadataRegistry(RegistryPort):
    """
    In-memory metadata registry.

    Example:
        registry = MetadataRegistry()

        registry.append(TaskRegistration(task_name="PAYMENT", target=check_limit))
        registry.append(TaskRegistration(task_name="PAYMENT", target=check_fraud))

        for entry in registry.find("PAYMENT"):
            print(entry.describe())
    """

    def __init__(self) -> None:
        """Initialize the registry."""
        self.tasks: list[TaskRegistration] = []

    def append(self, entry: TaskRegistration) -> None:
        """
        Append a registration.

        Args:
            entry: Registration to store.
        """
        self.tasks.append(entry)
        logger.debug("Registered '%s' for task '%s'", entry.describe(), entry.task_name)

    def all_entries(self) -> list[TaskRegistration]:
        """
        Get every registration in insertion order.

        Returns:
            The live list backing the registry.
        """
        return self.tasks

    def find(self, task_name: str) -> list[TaskRegistration]:
        """
        Get the registrations for a task name.

        Args:
            task_name: Exact, case-sensitive task name.

        Returns:
            Matching registrations in insertion order.
        """
        return [entry for entry in self.tasks if entry.task_name == task_name]

    def task_names(self) -> list[str]:
        """
        Get the distinct task names in first-registration order.

        Returns:
            List of task names.
        """
        return list(dict.fromkeys(entry.task_name for entry in self.tasks))

    def get_stats(self) -> dict[str, Any]:
        """
        Get registry statistics.

        Returns:
            Dictionary with statistics.
        """
        return {
            "total_entries": len(self.tasks),
            "total_task_names": len(self.task_names()),
        }

    def clear(self) -> None:
        """Clear all registrations."""
        self.tasks.clear()
        logging.info("Cleared all tasks from registry")

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[TaskRegistration]:
        return iter(self.tasks)
