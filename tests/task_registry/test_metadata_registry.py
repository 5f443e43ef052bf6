"""Tests for the metadata registry and task registration model."""

import pytest

from parallel_tasks.task_registry import (
    MetadataRegistry,
    TaskRegistration,
    clear_registry,
    get_registry,
    reset_registry,
)


def handler_a(context: object) -> str:
    return "a"


def handler_b(context: object) -> str:
    return "b"


class TestTaskRegistration:
    """Test TaskRegistration model."""

    def test_create_registration(self) -> None:
        """Test creating a registration."""
        entry = TaskRegistration(task_name="PAYMENT", target=handler_a)

        assert entry.task_name == "PAYMENT"
        assert entry.target is handler_a
        assert entry.describe() == "handler_a"

    def test_registration_validation(self) -> None:
        """Test that an empty task name is rejected."""
        with pytest.raises(ValueError, match="non-empty string"):
            TaskRegistration(task_name="", target=handler_a)

    def test_non_callable_target_is_accepted(self) -> None:
        """Test that targets are not validated at registration time."""
        entry = TaskRegistration(task_name="PAYMENT", target=42)

        assert entry.target == 42
        assert entry.describe() == "42"

    def test_registration_is_immutable(self) -> None:
        """Test that registrations cannot be modified."""
        entry = TaskRegistration(task_name="PAYMENT", target=handler_a)

        with pytest.raises(AttributeError):
            entry.task_name = "OTHER"  # type: ignore[misc]


class TestMetadataRegistry:
    """Test MetadataRegistry implementation."""

    def test_new_registry_is_empty(self) -> None:
        """Test creating an empty registry."""
        registry = MetadataRegistry()

        assert registry.all_entries() == []
        assert len(registry) == 0

    def test_append_preserves_order(self) -> None:
        """Test that entries keep insertion order."""
        registry = MetadataRegistry()
        entries = [
            TaskRegistration(task_name="B", target=handler_b),
            TaskRegistration(task_name="A", target=handler_a),
            TaskRegistration(task_name="B", target=handler_a),
        ]

        for entry in entries:
            registry.append(entry)

        assert registry.all_entries() == entries
        assert list(registry) == entries

    def test_duplicates_are_kept(self) -> None:
        """Test that the same entry can be appended twice."""
        registry = MetadataRegistry()
        entry = TaskRegistration(task_name="A", target=handler_a)

        registry.append(entry)
        registry.append(entry)

        assert len(registry) == 2

    def test_all_entries_returns_live_list(self) -> None:
        """Test that all_entries is not a copy."""
        registry = MetadataRegistry()
        registry.append(TaskRegistration(task_name="A", target=handler_a))

        registry.all_entries().clear()

        assert len(registry) == 0

    def test_find_is_exact_and_case_sensitive(self) -> None:
        """Test finding entries by task name."""
        registry = MetadataRegistry()
        first = TaskRegistration(task_name="PAYMENT", target=handler_a)
        other = TaskRegistration(task_name="payment", target=handler_b)
        second = TaskRegistration(task_name="PAYMENT", target=handler_b)
        for entry in (first, other, second):
            registry.append(entry)

        assert registry.find("PAYMENT") == [first, second]
        assert registry.find("payment") == [other]
        assert registry.find("PAY") == []

    def test_task_names_and_stats(self) -> None:
        """Test registry statistics."""
        registry = MetadataRegistry()
        registry.append(TaskRegistration(task_name="B", target=handler_a))
        registry.append(TaskRegistration(task_name="A", target=handler_a))
        registry.append(TaskRegistration(task_name="B", target=handler_b))

        assert registry.task_names() == ["B", "A"]
        assert registry.get_stats() == {"total_entries": 3, "total_task_names": 2}

    def test_clear(self) -> None:
        """Test clearing the registry."""
        registry = MetadataRegistry()
        registry.append(TaskRegistration(task_name="A", target=handler_a))

        registry.clear()

        assert registry.all_entries() == []


class TestGlobalRegistry:
    """Test the process-wide registry accessors."""

    def test_get_registry_returns_same_instance(self) -> None:
        """Test that repeated calls return one instance."""
        assert get_registry() is get_registry()
        assert isinstance(get_registry(), MetadataRegistry)

    def test_reset_registry_creates_new_instance(self) -> None:
        """Test that resetting drops the old instance."""
        before = get_registry()
        before.append(TaskRegistration(task_name="A", target=handler_a))

        reset_registry()

        after = get_registry()
        assert after is not before
        assert len(after) == 0
        assert len(before) == 1

    def test_clear_registry_keeps_instance(self) -> None:
        """Test that clearing empties the same instance."""
        registry = get_registry()
        registry.append(TaskRegistration(task_name="A", target=handler_a))

        clear_registry()

        assert get_registry() is registry
        assert len(registry) == 0
