"""
Module loading strategies.

``PackageModuleLoader`` imports a file under its dotted name so that relative
imports and package state behave as usual. ``ScriptModuleLoader`` executes a
file on its own under a synthetic module name. ``ModuleImporter`` picks one
per file using ``ModuleFormatResolver``.
"""

import asyncio
import importlib
import importlib.util
import logging
import sys
from collections.abc import Iterable, Mapping
from importlib.machinery import BYTECODE_SUFFIXES, SourceFileLoader, SourcelessFileLoader
from pathlib import Path
from types import ModuleType

from uuid6 import uuid7

from parallel_tasks.exceptions import ModuleLoadError
from parallel_tasks.loader.domain.module_format import LoadedModule, ModuleFormat
from parallel_tasks.loader.domain.module_loader_port import ModuleLoaderPort
from parallel_tasks.loader.infrastructure.format_resolver import ModuleFormatResolver
from parallel_tasks.loader.utils.path_utils import location_to_path

logger = logging.getLogger(__name__)

SCRIPT_MODULE_PREFIX = "parallel_tasks_script_"


def _package_parts(path: Path) -> tuple[Path, list[str]]:
    parts = [] if path.name == "__init__.py" else [path.stem]
    directory = path.parent
    while (directory / "__init__.py").is_file() and directory.parent != directory:
        parts.insert(0, directory.name)
        directory = directory.parent
    return directory, parts


def package_module_name(path: Path) -> tuple[Path, str]:
    """
    Compute the import root and dotted module name of a file.

    Parent directories are walked for as long as they contain an
    ``__init__.py``; the first one that does not is the import root.

    Args:
        path: Absolute path of a Python source file.

    Returns:
        Tuple of (import root directory, dotted module name).

    Raises:
        ValueError: If a path component is not a valid module name.

    Example:
        # /srv/app/tasks/__init__.py exists, /srv/app/__init__.py does not
        package_module_name(Path("/srv/app/tasks/payment.py"))
        # (Path("/srv/app"), "tasks.payment")
    """
    root, parts = _package_parts(path)
    if not parts or not all(part.isidentifier() for part in parts):
        raise ValueError(f"'{'.'.join(parts)}' is not an importable module name")
    return root, ".".join(parts)


class PackageModuleLoader(ModuleLoaderPort):
    """
    Imports a file as part of its package.

    Module bodies run on the event loop thread, like script loads, so
    handler registration during import stays in load order.
    """

    module_format = ModuleFormat.PACKAGE

    async def load(self, location: str) -> ModuleType:
        path = location_to_path(location)
        if not path.is_file():
            raise ModuleLoadError(str(path), "file does not exist")

        try:
            root, module_name = package_module_name(path)
        except ValueError as e:
            raise ModuleLoadError(str(path), str(e)) from e

        try:
            module = self._import(root, module_name)
        except Exception as e:
            raise ModuleLoadError(str(path), e) from e

        loaded_from = getattr(module, "__file__", None)
        if loaded_from and Path(loaded_from).resolve() != path:
            raise ModuleLoadError(
                str(path), f"module name '{module_name}' is already bound to {loaded_from}"
            )
        return module

    @staticmethod
    def _import(root: Path, module_name: str) -> ModuleType:
        root_entry = str(root)
        if root_entry not in sys.path:
            sys.path.insert(0, root_entry)
        importlib.invalidate_caches()
        return importlib.import_module(module_name)


class ScriptModuleLoader(ModuleLoaderPort):
    """
    Executes a file standalone under a unique module name.

    Source files use ``SourceFileLoader``; compiled files use
    ``SourcelessFileLoader``. Loaded modules stay in ``sys.modules`` so their
    classes keep resolving (pickling, ``typing.get_type_hints``); every load
    adds one entry, so repeated ``initialize`` calls grow ``sys.modules``.
    """

    module_format = ModuleFormat.SCRIPT

    async def load(self, location: str) -> ModuleType:
        return self.load_sync(location)

    def load_sync(self, location: str) -> ModuleType:
        path = location_to_path(location)
        if not path.is_file():
            raise ModuleLoadError(str(path), "file does not exist")

        module_name = f"{SCRIPT_MODULE_PREFIX}{uuid7().hex}"
        loader_cls = SourcelessFileLoader if path.suffix in BYTECODE_SUFFIXES else SourceFileLoader
        loader = loader_cls(module_name, str(path))
        spec = importlib.util.spec_from_file_location(module_name, str(path), loader=loader)
        if spec is None:
            raise ModuleLoadError(str(path), "no module spec could be created")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise ModuleLoadError(str(path), e) from e
        return module


class ModuleImporter:
    """
    Loads discovered files, choosing the loading strategy per file.

    Example:
        importer = ModuleImporter()
        exports, module_format = await importer.load("./tasks/payment.py")
        modules = await importer.import_modules(["./tasks/a.py", "./tasks/b.py"])
    """

    def __init__(
        self,
        resolver: ModuleFormatResolver | None = None,
        loaders: Mapping[ModuleFormat, ModuleLoaderPort] | None = None,
        skip_failed: bool = False,
    ) -> None:
        """
        Initialize the importer.

        Args:
            resolver: Format resolver (default: ModuleFormatResolver()).
            loaders: Loader per format (default: package and script loaders).
            skip_failed: If True, ``import_modules`` leaves out files that fail
                to load instead of raising.
        """
        self.resolver = resolver or ModuleFormatResolver()
        self.loaders: dict[ModuleFormat, ModuleLoaderPort] = dict(
            loaders
            or {
                ModuleFormat.PACKAGE: PackageModuleLoader(),
                ModuleFormat.SCRIPT: ScriptModuleLoader(),
            }
        )
        self.skip_failed = skip_failed

    async def load(self, file_path: str) -> LoadedModule:
        """
        Load one file.

        Args:
            file_path: Relative or absolute path, or ``file://`` URL.

        Returns:
            LoadedModule with the module and the format it was loaded with.

        Raises:
            ModuleLoadError: If the file cannot be loaded.
        """
        path = location_to_path(file_path)
        return await self._load_as(path, await self.resolver.resolve(path))

    async def import_modules(self, file_paths: Iterable[str]) -> list[LoadedModule]:
        """
        Load several files.

        Formats are resolved concurrently; module bodies then run one file at
        a time in input order, so anything they register lands in that order.

        Args:
            file_paths: Files to load.

        Returns:
            Loaded modules in the order of ``file_paths``.

        Raises:
            ModuleLoadError: If a file fails to load and ``skip_failed`` is False.
        """
        paths = [location_to_path(file_path) for file_path in file_paths]
        module_formats = await asyncio.gather(*(self.resolver.resolve(path) for path in paths))

        loaded: list[LoadedModule] = []
        for path, module_format in zip(paths, module_formats, strict=True):
            try:
                loaded.append(await self._load_as(path, module_format))
            except ModuleLoadError as e:
                if not self.skip_failed:
                    raise
                logger.warning("Skipping %s: %s", path, e)
        return loaded

    async def _load_as(self, path: Path, module_format: ModuleFormat) -> LoadedModule:
        module = await self.loaders[module_format].load(str(path))
        logger.debug("Loaded %s as %s module '%s'", path, module_format, module.__name__)
        return LoadedModule(module, module_format)
