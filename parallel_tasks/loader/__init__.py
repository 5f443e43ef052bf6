"""
Handler discovery: file globbing, module loading and export extraction.
"""

from parallel_tasks.loader.domain import LoadedModule, ModuleFormat, ModuleLoaderPort
from parallel_tasks.loader.infrastructure import (
    ExportExtractor,
    FileDiscoveryService,
    ModuleFormatResolver,
    ModuleImporter,
    PackageModuleLoader,
    ScriptModuleLoader,
)

__all__ = [
    # Domain
    "LoadedModule",
    "ModuleFormat",
    "ModuleLoaderPort",
    # Infrastructure
    "ExportExtractor",
    "FileDiscoveryService",
    "ModuleFormatResolver",
    "ModuleImporter",
    "PackageModuleLoader",
    "ScriptModuleLoader",
]
