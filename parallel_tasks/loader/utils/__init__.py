"""Utilities for module loading."""

from parallel_tasks.loader.utils.path_utils import (
    location_to_path,
    normalize_path,
    path_to_location,
    split_classes_and_patterns,
    tasks_to_list,
)

__all__ = [
    "location_to_path",
    "normalize_path",
    "path_to_location",
    "split_classes_and_patterns",
    "tasks_to_list",
]
