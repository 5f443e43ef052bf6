"""
Module format resolution.

Decides whether a file is imported as part of its package or executed as a
standalone script. Some files decide by name or extension alone; plain ``.py``
files look at the nearest ``pyproject.toml``:

    [tool.parallel-tasks]
    module-type = "package"
"""

import asyncio
import logging
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from parallel_tasks.loader.domain.module_format import ModuleFormat

logger = logging.getLogger(__name__)

MANIFEST_NAME = "pyproject.toml"
MANIFEST_TOOL_KEY = "parallel-tasks"
MANIFEST_FORMAT_KEY = "module-type"

PACKAGE_FILE_NAMES: tuple[str, ...] = ("__init__.py",)
SCRIPT_EXTENSIONS: tuple[str, ...] = (".pyw", ".pyc")
# No source extension implies package imports; only __init__.py does
PACKAGE_EXTENSIONS: tuple[str, ...] = ()


def format_from_manifest(manifest: Mapping[str, Any] | None) -> ModuleFormat:
    """
    Get the module format declared by a parsed manifest.

    Args:
        manifest: Parsed ``pyproject.toml`` content, or None if there is none.

    Returns:
        PACKAGE if the manifest declares it, SCRIPT otherwise.
    """
    if not manifest:
        return ModuleFormat.SCRIPT
    tool = manifest.get("tool")
    settings = tool.get(MANIFEST_TOOL_KEY) if isinstance(tool, Mapping) else None
    declared = settings.get(MANIFEST_FORMAT_KEY) if isinstance(settings, Mapping) else None
    if declared == ModuleFormat.PACKAGE.value:
        return ModuleFormat.PACKAGE
    return ModuleFormat.SCRIPT


def find_nearest_manifest(path: str | Path, manifest_name: str = MANIFEST_NAME) -> dict[str, Any] | None:
    """
    Find and parse the manifest closest to a file.

    The file's directory and then each ancestor are checked in turn. The
    search stops at the first manifest that exists: if it cannot be read or
    is not valid TOML it is treated as missing rather than raised.

    Args:
        path: File whose manifest to look up.
        manifest_name: Manifest file name.

    Returns:
        Parsed manifest, or None.
    """
    current = Path(path).parent
    while True:
        candidate = current / manifest_name
        if candidate.is_file():
            try:
                with candidate.open("rb") as f:
                    return tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning("Ignoring unreadable manifest %s: %s", candidate, e)
                return None
        if current.parent == current:
            # the top of the file tree is reached
            return None
        current = current.parent


class ModuleFormatResolver:
    """
    Resolves the module format of a file.

    Example:
        resolver = ModuleFormatResolver()
        module_format = await resolver.resolve("/srv/app/tasks/payment.py")
    """

    def __init__(
        self,
        package_extensions: Iterable[str] = PACKAGE_EXTENSIONS,
        script_extensions: Iterable[str] = SCRIPT_EXTENSIONS,
        package_file_names: Iterable[str] = PACKAGE_FILE_NAMES,
        manifest_name: str = MANIFEST_NAME,
    ) -> None:
        self.package_extensions = frozenset(package_extensions)
        self.script_extensions = frozenset(script_extensions)
        self.package_file_names = frozenset(package_file_names)
        self.manifest_name = manifest_name

    def format_from_name(self, path: str | Path) -> ModuleFormat | None:
        """
        Get the format implied by a file's name alone.

        Args:
            path: File path.

        Returns:
            The implied format, or None if the manifest must decide.
        """
        file_path = Path(path)
        if file_path.name in self.package_file_names or file_path.suffix in self.package_extensions:
            return ModuleFormat.PACKAGE
        if file_path.suffix in self.script_extensions:
            return ModuleFormat.SCRIPT
        return None

    async def resolve(self, path: str | Path) -> ModuleFormat:
        """
        Resolve the format of a file.

        Args:
            path: File path.

        Returns:
            The module format to load the file with.
        """
        module_format = self.format_from_name(path)
        if module_format is None:
            manifest = await asyncio.to_thread(find_nearest_manifest, path, self.manifest_name)
            module_format = format_from_manifest(manifest)
        logger.debug("Resolved %s as %s", path, module_format)
        return module_format
