"""
Module loader interface.
Defines how a file path becomes a module object.
"""

from abc import ABC, abstractmethod
from types import ModuleType

from parallel_tasks.loader.domain.module_format import ModuleFormat


class ModuleLoaderPort(ABC):
    """
    Interface for one module loading strategy.
    """

    module_format: ModuleFormat

    @abstractmethod
    async def load(self, location: str) -> ModuleType:
        """
        Load the module stored at a location.

        Args:
            location: Absolute file path (or ``file://`` URL where supported).

        Returns:
            The loaded module.

        Raises:
            ModuleLoadError: If the file is missing or fails to execute.
        """
        ...
