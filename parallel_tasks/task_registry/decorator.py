"""
Task decorator.
Marks methods as task handlers; instantiating the declaring class registers them.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from parallel_tasks.task_registry.domain.registry_port import RegistryPort
from parallel_tasks.task_registry.domain.task_model import TaskRegistration
from parallel_tasks.task_registry.infrastructure.metadata_registry import MetadataRegistry

logger = logging.getLogger(__name__)

# Process-wide registry, created on first access
_global_registry: MetadataRegistry | None = None

_HOOK_MARKER = "__parallel_tasks_hooked__"

# id of each instance inside its outermost hooked constructor -> registered yet
_under_construction: dict[int, bool] = {}


class TaskMember:
    """
    Class member produced by ``@register_task``.

    Behaves like the wrapped member for class and instance attribute access,
    and carries the task names it was registered under. Binding it to a class
    installs the registration hook on that class's ``__init__``.
    """

    def __init__(self, member: Any, task_name: str, registry: RegistryPort | None) -> None:
        self.member = member
        self.bindings: list[tuple[str, RegistryPort | None]] = [(task_name, registry)]
        self.attr_name: str | None = None
        functools.update_wrapper(self, member, updated=())  # type: ignore[arg-type]

    def add_binding(self, task_name: str, registry: RegistryPort | None) -> None:
        self.bindings.append((task_name, registry))

    @property
    def task_names(self) -> list[str]:
        return [task_name for task_name, _ in self.bindings]

    def __set_name__(self, owner: type, name: str) -> None:
        self.attr_name = name
        _install_registration_hook(owner)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        return _bind(self.member, instance, owner)

    def bind(self, instance: Any) -> Any:
        """Resolve the member against an instance (the registration target)."""
        return _bind(self.member, instance, type(instance))


def _bind(member: Any, instance: Any, owner: type | None) -> Any:
    getter = getattr(type(member), "__get__", None)
    if getter is None:
        return member
    return getter(member, instance, owner)


def register_task(
    task_name: str,
    *,
    registry: RegistryPort | None = None,
) -> Callable[[Any], TaskMember]:
    """
    Decorator to register a method as a handler for a task name.

    Registration happens when the declaring class is instantiated, once per
    instance and decorated member. Stack the decorator to register one member
    under several task names.

    Args:
        task_name: Case-sensitive task name to register under.
        registry: Registry to append to (defaults to the process-wide registry,
            looked up at instantiation time).

    Returns:
        Decorator returning a ``TaskMember``.

    Example:
        class PaymentValidators:
            @register_task("PAYMENT")
            async def check_amount(self, payment: dict[str, int]) -> bool:
                return payment["amount"] > 0

        PaymentValidators()  # appends one registration for "PAYMENT"
    """

    def decorator(member: Any) -> TaskMember:
        if isinstance(member, TaskMember):
            member.add_binding(task_name, registry)
            return member
        return TaskMember(member, task_name, registry)

    return decorator


def register_tasks(instance: Any, registry: RegistryPort | None = None) -> list[TaskRegistration]:
    """
    Register every ``@register_task`` member of an instance.

    This is what instantiation triggers. A constructor may call it explicitly,
    for example to pick the registry; instantiation then does not register
    the instance a second time. Any other call appends a new set of
    registrations.

    Args:
        instance: Object whose class declares task members.
        registry: Registry overriding the one given to each decorator.

    Returns:
        The registrations that were appended, in order.
    """
    if id(instance) in _under_construction:
        _under_construction[id(instance)] = True

    created: list[TaskRegistration] = []
    for member in _collect_task_members(type(instance)):
        target = member.bind(instance)
        for task_name, member_registry in member.bindings:
            entry = TaskRegistration(task_name=task_name, target=target)
            _resolve_registry(registry if registry is not None else member_registry).append(entry)
            created.append(entry)
    return created


def _collect_task_members(cls: type) -> list[TaskMember]:
    # Walk base classes first so subclasses override by name, keeping definition order
    members: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        members.update(vars(klass))
    return [value for value in members.values() if isinstance(value, TaskMember)]


def _resolve_registry(registry: RegistryPort | None) -> RegistryPort:
    return registry if registry is not None else get_registry()


def _install_registration_hook(owner: type) -> None:
    if vars(owner).get(_HOOK_MARKER):
        return

    original_init = vars(owner).get("__init__")

    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        key = id(self)
        if key in _under_construction:
            # Nested in a subclass constructor; the outermost one registers
            _init(self, *args, **kwargs)
            return

        _under_construction[key] = False
        try:
            _init(self, *args, **kwargs)
        finally:
            registered = _under_construction.pop(key)
        if not registered:
            register_tasks(self)

    def _init(self: Any, *args: Any, **kwargs: Any) -> None:
        if original_init is not None:
            original_init(self, *args, **kwargs)
        else:
            super(owner, self).__init__(*args, **kwargs)

    if original_init is not None:
        functools.update_wrapper(__init__, original_init)
    __init__.__qualname__ = f"{owner.__qualname__}.__init__"

    owner.__init__ = __init__  # type: ignore[misc]
    setattr(owner, _HOOK_MARKER, True)


def get_registry() -> MetadataRegistry:
    """
    Get the process-wide metadata registry, creating it on first access.

    Returns:
        The process-wide MetadataRegistry instance.
    """
    global _global_registry
    if _global_registry is None:
        _global_registry = MetadataRegistry()
    return _global_registry


def reset_registry() -> None:
    """Drop the process-wide registry; the next ``get_registry`` creates a new one."""
    global _global_registry
    _global_registry = None
    logger.info("Reset process-wide task registry")


def clear_registry() -> None:
    """Clear the process-wide registry in place (useful for testing)."""
    get_registry().clear()
