"""
Export-tree extraction.
Collects callables (handler classes in practice) from loaded modules.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from enum import StrEnum, auto
from types import ModuleType
from typing import Any

logger = logging.getLogger(__name__)


class ExportKind(StrEnum):
    """Shape of a value found while walking module exports.

    Attributes:
        CALLABLE: Collected as-is (classes and functions)
        SEQUENCE: Items are walked in order
        MAPPING: Values are walked in key order (modules included)
        SCALAR: Ignored
    """

    CALLABLE = auto()
    SEQUENCE = auto()
    MAPPING = auto()
    SCALAR = auto()


def classify(value: Any) -> ExportKind:
    """
    Classify an exported value.

    Args:
        value: Any value reachable from a module.

    Returns:
        The value's ExportKind.
    """
    if callable(value):
        return ExportKind.CALLABLE
    if isinstance(value, (list, tuple)):
        return ExportKind.SEQUENCE
    if isinstance(value, (Mapping, ModuleType)):
        return ExportKind.MAPPING
    return ExportKind.SCALAR


def module_exports(module: ModuleType) -> dict[str, Any]:
    """
    Get the public exports of a module.

    Names listed in ``__all__`` when it is defined. Otherwise every public
    name, minus callables defined in other modules and modules that are not
    submodules of this one, so imported helpers are not mistaken for exports.

    Args:
        module: Loaded module.

    Returns:
        Mapping of export name to value, in definition order.
    """
    names = getattr(module, "__all__", None)
    if names is not None:
        return {name: getattr(module, name) for name in names if hasattr(module, name)}

    exports: dict[str, Any] = {}
    for name, value in vars(module).items():
        if name.startswith("_"):
            continue
        if isinstance(value, ModuleType):
            if not value.__name__.startswith(f"{module.__name__}."):
                continue
        elif callable(value) and getattr(value, "__module__", module.__name__) != module.__name__:
            continue
        exports[name] = value
    return exports


def _children(value: Any) -> Iterable[Any]:
    if isinstance(value, ModuleType):
        return module_exports(value).values()
    if isinstance(value, Mapping):
        return value.values()
    return value


class ExportExtractor:
    """
    Walks module export trees and collects every callable found.

    Lists, tuples, mappings and modules are descended into; each container is
    visited at most once per top-level module, so self-referencing exports
    terminate. Callables are collected every time they are reached.

    Example:
        extractor = ExportExtractor()
        classes = extractor.extract_callables([payment_module, fraud_module])
    """

    def extract_callables(self, modules: Iterable[Any]) -> list[Callable[..., Any]]:
        """
        Collect callables from several modules.

        Args:
            modules: Loaded modules (or any export values).

        Returns:
            Callables in module order, then walk order within a module.
        """
        collected: list[Callable[..., Any]] = []
        for module in modules:
            visited: set[int] = set()
            self._walk(module, collected, visited)
        return collected

    def _walk(self, value: Any, collected: list[Callable[..., Any]], visited: set[int]) -> None:
        kind = classify(value)
        if kind is ExportKind.CALLABLE:
            collected.append(value)
            return
        if kind is ExportKind.SCALAR:
            return

        if id(value) in visited:
            return
        visited.add(id(value))
        for child in _children(value):
            self._walk(child, collected, visited)
