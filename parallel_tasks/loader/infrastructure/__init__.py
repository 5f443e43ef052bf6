"""Infrastructure layer for file discovery and module loading."""

from parallel_tasks.loader.infrastructure.export_extractor import (
    ExportExtractor,
    ExportKind,
    classify,
    module_exports,
)
from parallel_tasks.loader.infrastructure.file_discovery import FileDiscoveryService
from parallel_tasks.loader.infrastructure.format_resolver import (
    ModuleFormatResolver,
    find_nearest_manifest,
    format_from_manifest,
)
from parallel_tasks.loader.infrastructure.module_loader import (
    ModuleImporter,
    PackageModuleLoader,
    ScriptModuleLoader,
    package_module_name,
)

__all__ = [
    "ExportExtractor",
    "ExportKind",
    "classify",
    "module_exports",
    "FileDiscoveryService",
    "ModuleFormatResolver",
    "find_nearest_manifest",
    "format_from_manifest",
    "ModuleImporter",
    "PackageModuleLoader",
    "ScriptModuleLoader",
    "package_module_name",
]
