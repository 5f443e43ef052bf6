"""Engine configuration model."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from parallel_tasks.loader.utils.path_utils import tasks_to_list


class ParallelTasksOptions(BaseModel):
    """Configuration for ParallelTasks.

    Attributes:
        tasks: Handler classes and/or glob patterns locating handler files.
            A name-keyed mapping (such as a module namespace) is accepted
            and turned into the list of its values.
        skip_failed_modules: If True, files that fail to load during
            ``initialize`` are logged and skipped instead of aborting it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    tasks: list[Any] = Field(
        default_factory=list,
        description="Handler classes and glob patterns",
        examples=[["./tasks/**/*.py"]],
    )
    skip_failed_modules: bool = Field(
        default=False,
        description="Skip files that fail to load instead of failing initialization",
    )

    @field_validator("tasks", mode="before")
    @classmethod
    def _normalize_tasks(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (Mapping, str)):
            return tasks_to_list(value)
        return value

    @property
    def patterns(self) -> list[str]:
        """Glob patterns among ``tasks``."""
        return [task for task in self.tasks if isinstance(task, str)]
