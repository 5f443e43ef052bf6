"""Module format enumeration and loaded module model."""

from enum import StrEnum
from typing import Any, NamedTuple


class ModuleFormat(StrEnum):
    """How a discovered file is turned into a module.

    Attributes:
        PACKAGE: Imported under its dotted name as part of its package
        SCRIPT: Executed standalone from its path under a synthetic name
    """

    PACKAGE = "package"
    SCRIPT = "script"


class LoadedModule(NamedTuple):
    """A loaded module's exports and the format used to load it."""

    exports: Any
    module_format: ModuleFormat
