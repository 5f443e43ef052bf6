"""Infrastructure layer for task registry."""

from parallel_tasks.task_registry.infrastructure.metadata_registry import MetadataRegistry

__all__ = ["MetadataRegistry"]
