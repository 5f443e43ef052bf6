"""Domain layer for module loading."""

from parallel_tasks.loader.domain.module_format import LoadedModule, ModuleFormat
from parallel_tasks.loader.domain.module_loader_port import ModuleLoaderPort

__all__ = ["LoadedModule", "ModuleFormat", "ModuleLoaderPort"]
