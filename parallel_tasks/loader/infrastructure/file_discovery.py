"""
File discovery.
Expands glob patterns into the list of loadable handler files.
"""

import glob
import logging
import os
from collections.abc import Callable, Iterable

from parallel_tasks.loader.utils.path_utils import normalize_path

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS: tuple[str, ...] = (".py", ".pyw", ".pyc")
EXCLUDED_SUFFIXES: tuple[str, ...] = (".pyi",)


def _expand(pattern: str) -> list[str]:
    return glob.glob(pattern, recursive=True)


class FileDiscoveryService:
    """
    Expands glob patterns into handler file paths.

    Patterns are expanded independently and their results concatenated in
    pattern order. Paths with an unsupported extension, or whose name ends
    with an excluded suffix (type stubs), are dropped.

    Example:
        service = FileDiscoveryService()
        files = service.discover_files(["./tasks/**/*.py"])
    """

    def __init__(
        self,
        supported_extensions: Iterable[str] = SUPPORTED_EXTENSIONS,
        excluded_suffixes: Iterable[str] = EXCLUDED_SUFFIXES,
        expand: Callable[[str], Iterable[str | None]] = _expand,
    ) -> None:
        """
        Initialize the discovery service.

        Args:
            supported_extensions: Extensions (with leading dot) worth loading.
            excluded_suffixes: File name endings that are always skipped.
            expand: Function expanding one pattern into candidate paths.
        """
        self.supported_extensions = frozenset(supported_extensions)
        self.excluded_suffixes = tuple(excluded_suffixes)
        self._expand = expand

    def discover_files(self, patterns: list[str]) -> list[str]:
        """
        Discover handler files matching the given patterns.

        Args:
            patterns: Glob patterns, expanded in order.

        Returns:
            Matching file paths.

        Raises:
            TypeError: If ``patterns`` is None.
        """
        if patterns is None:
            raise TypeError("patterns must be a list of glob patterns, got None")

        candidates: list[str | None] = []
        for pattern in patterns:
            candidates.extend(self._expand(normalize_path(pattern)))

        files = [path for path in candidates if path and self.is_valid_file(path)]
        logger.debug("Discovered %d file(s) from %d pattern(s)", len(files), len(patterns))
        return files

    def is_valid_file(self, path: str) -> bool:
        """
        Check whether a path names a loadable handler file.

        Args:
            path: Candidate file path.

        Returns:
            True if the extension is supported and no excluded suffix matches.
        """
        if not path or not isinstance(path, str):
            return False
        extension = os.path.splitext(path)[1]
        is_excluded = path.endswith(self.excluded_suffixes)
        return extension in self.supported_extensions and not is_excluded
