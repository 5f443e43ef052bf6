"""
Path and task-list utilities.
"""

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

FILE_URL_PREFIX = "file://"


def normalize_path(path: str) -> str:
    """
    Normalize a path or glob pattern for expansion.

    Collapses redundant separators and ``.`` segments; on Windows backslashes
    are turned into forward slashes.

    Args:
        path: Path or glob pattern.

    Returns:
        Normalized path.

    Example:
        normalize_path("./tasks//*.py")  # 'tasks/*.py'
    """
    normalized = os.path.normpath(path)
    if sys.platform == "win32":
        normalized = normalized.replace("\\", "/")
    return normalized


def location_to_path(location: str | Path) -> Path:
    """
    Convert a bare path or a ``file://`` URL into an absolute path.

    Args:
        location: File path or file URL.

    Returns:
        Absolute path.
    """
    if isinstance(location, str) and location.startswith(FILE_URL_PREFIX):
        parsed = urlparse(location)
        return Path(url2pathname(parsed.path)).resolve()
    return Path(location).resolve()


def path_to_location(path: str | Path) -> str:
    """Convert a path into a ``file://`` URL."""
    return Path(path).resolve().as_uri()


def tasks_to_list(tasks: Sequence[Any] | Mapping[str, Any] | None) -> list[Any] | None:
    """
    Normalize a task list given as a sequence or as a name-keyed mapping.

    Mappings (for example the namespace of an imported module) become the
    list of their values in key order. ``None`` is passed through.

    Args:
        tasks: List of classes and glob patterns, or a mapping of them.

    Returns:
        List of tasks.
    """
    if tasks is None:
        return None
    if isinstance(tasks, Mapping):
        return list(tasks.values())
    if isinstance(tasks, str):
        return [tasks]
    return list(tasks)


def split_classes_and_patterns(tasks: Sequence[Any]) -> tuple[list[Any], list[str]]:
    """
    Split a mixed task list into direct references and glob patterns.

    Args:
        tasks: Mixed list of classes (or other callables) and strings.

    Returns:
        Tuple of (references, patterns), each keeping input order.
    """
    references = [item for item in tasks if not isinstance(item, str)]
    patterns = [item for item in tasks if isinstance(item, str)]
    return references, patterns
