"""Parallel task engine: handler discovery and concurrent fan-out."""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Mapping
from typing import Any

from parallel_tasks.exceptions import NoTasksFoundError
from parallel_tasks.executor.domain.options import ParallelTasksOptions
from parallel_tasks.executor.domain.parallel_tasks_port import ParallelTasksPort
from parallel_tasks.loader.infrastructure.export_extractor import ExportExtractor
from parallel_tasks.loader.infrastructure.file_discovery import FileDiscoveryService
from parallel_tasks.loader.infrastructure.module_loader import ModuleImporter
from parallel_tasks.loader.utils.path_utils import split_classes_and_patterns
from parallel_tasks.task_registry.decorator import get_registry
from parallel_tasks.task_registry.domain.registry_port import RegistryPort

logger = logging.getLogger(__name__)


async def invoke_handler(target: Any, context: Any) -> Any:
    """Invoke one handler with the context, awaiting the result if needed.

    Synchronous handlers run inline on the event loop.

    Args:
        target: Registered handler
        context: Sole argument for the handler

    Returns:
        The handler's (awaited) return value

    Raises:
        Exception: Whatever the handler raises; TypeError if it is not callable
    """
    result = target(context)
    if inspect.isawaitable(result):
        result = await result
    return result


class ParallelTasks(ParallelTasksPort):
    """Discovers handler classes and fans task executions out to handlers.

    Usage is two-phase: ``initialize`` collects handler classes (direct
    references plus those found in files matching the glob patterns) without
    instantiating them. Instantiating a class registers its ``@register_task``
    members, after which ``execute`` can run them.

    Example:
        engine = ParallelTasks({"tasks": [FraudChecks, "./tasks/**/*.py"]})
        for handler_class in await engine.initialize():
            handler_class()

        results = await engine.execute("PAYMENT", {"amount": 100})
        errors = [r for r in results if isinstance(r, Exception)]
    """

    def __init__(
        self,
        options: ParallelTasksOptions | Mapping[str, Any] | None = None,
        *,
        registry: RegistryPort | None = None,
        discovery: FileDiscoveryService | None = None,
        importer: ModuleImporter | None = None,
        extractor: ExportExtractor | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            options: Engine options, or a mapping validated into them
            registry: Registry to read handlers from (default: the
                process-wide registry, looked up on every ``execute``)
            discovery: File discovery service
            importer: Module importer
            extractor: Export extractor
        """
        if options is None:
            options = ParallelTasksOptions()
        elif not isinstance(options, ParallelTasksOptions):
            options = ParallelTasksOptions.model_validate(options)
        self.options = options
        self._registry = registry
        self.discovery = discovery or FileDiscoveryService()
        self.importer = importer or ModuleImporter(skip_failed=options.skip_failed_modules)
        self.extractor = extractor or ExportExtractor()

    @property
    def registry(self) -> RegistryPort:
        """Registry handlers are read from."""
        return self._registry if self._registry is not None else get_registry()

    async def initialize(self) -> list[Any]:
        """Collect handler classes from direct references and glob patterns.

        Returns:
            Direct references first, then callables extracted from discovered
            files in file order. Nothing is instantiated.

        Raises:
            ModuleLoadError: If a discovered file fails to load (unless
                ``skip_failed_modules`` is set)
        """
        classes, patterns = split_classes_and_patterns(self.options.tasks)
        if not patterns:
            return classes

        files = self.discovery.discover_files(patterns)
        loaded_modules = await self.importer.import_modules(files)
        loaded_classes = self.extractor.extract_callables(loaded.exports for loaded in loaded_modules)

        logger.info(
            "Initialized %d direct and %d discovered handler(s) from %d file(s)",
            len(classes),
            len(loaded_classes),
            len(loaded_modules),
        )
        return [*classes, *loaded_classes]

    async def bootstrap(self) -> list[Any]:
        """Initialize and instantiate every handler class found.

        Instantiation registers the classes' ``@register_task`` members.
        Callables that are not classes are left alone.

        Returns:
            The created instances, in ``initialize`` order
        """
        return [handler() for handler in await self.initialize() if inspect.isclass(handler)]

    async def execute(self, task_name: str, context: Any) -> list[Any]:
        """Execute all handlers registered under a task name concurrently.

        Args:
            task_name: Case-sensitive task name
            context: Sole argument passed (by reference) to every handler

        Returns:
            One return value or raised exception per handler, in registration order

        Raises:
            NoTasksFoundError: If no handler is registered under ``task_name``
        """
        entries = self.registry.find(task_name)
        if not entries:
            raise NoTasksFoundError(task_name)

        logger.debug("Executing %d handler(s) for task '%s'", len(entries), task_name)
        return list(
            await asyncio.gather(
                *(invoke_handler(entry.target, context) for entry in entries),
                return_exceptions=True,
            )
        )
