"""
Task registry interface.
Defines how task registrations are stored and looked up.
"""

from abc import ABC, abstractmethod

from parallel_tasks.task_registry.domain.task_model import TaskRegistration


class RegistryPort(ABC):
    """
    Interface for the metadata registry.
    An append-only, ordered store of task registrations.
    """

    @abstractmethod
    def append(self, entry: TaskRegistration) -> None:
        """
        Append a registration.

        Duplicated task names are allowed and are what makes fan-out work.

        Args:
            entry: Registration to store.
        """
        ...

    @abstractmethod
    def all_entries(self) -> list[TaskRegistration]:
        """
        Get every registration in insertion order.

        Returns:
            The live list backing the registry, not a copy.
        """
        ...

    @abstractmethod
    def find(self, task_name: str) -> list[TaskRegistration]:
        """
        Get the registrations for a task name.

        Args:
            task_name: Exact, case-sensitive task name.

        Returns:
            Matching registrations in insertion order.
        """
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove every registration."""
        ...
