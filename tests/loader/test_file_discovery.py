"""Tests for file discovery."""

from collections.abc import Callable
from pathlib import Path

import pytest

from parallel_tasks.loader import FileDiscoveryService


def fake_expand(results: dict[str, list[str | None]], calls: list[str]) -> Callable[[str], list[str | None]]:
    def _expand(pattern: str) -> list[str | None]:
        calls.append(pattern)
        return results.get(pattern, [])

    return _expand


class TestFilterSupportedFiles:
    """Tests for extension and suffix filtering."""

    def test_filters_unsupported_and_stub_files(self) -> None:
        """Test that only loadable source files survive."""
        calls: list[str] = []
        service = FileDiscoveryService(
            expand=fake_expand({"tasks/*": ["a.py", "b.txt", "types.pyi", "c.pyw"]}, calls)
        )

        assert service.discover_files(["tasks/*"]) == ["a.py", "c.pyw"]

    def test_excluded_suffix_is_checked_independently(self) -> None:
        """Test that a suffix match drops files with a supported extension."""
        service = FileDiscoveryService(
            excluded_suffixes=("_types.py",),
            expand=fake_expand({"*": ["handlers.py", "payment_types.py", "data.json"]}, []),
        )

        assert service.discover_files(["*"]) == ["handlers.py"]

    def test_drops_empty_entries(self) -> None:
        """Test that sparse expansion results are tolerated."""
        service = FileDiscoveryService(expand=fake_expand({"*": [None, "", "a.py", None]}, []))

        assert service.discover_files(["*"]) == ["a.py"]

    def test_custom_extensions(self) -> None:
        """Test overriding the supported extensions."""
        service = FileDiscoveryService(
            supported_extensions=(".py",),
            expand=fake_expand({"*": ["a.py", "b.pyw", "c.pyc"]}, []),
        )

        assert service.discover_files(["*"]) == ["a.py"]

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("handlers.py", True),
            ("handlers.pyc", True),
            ("handlers.pyi", False),
            ("handlers.py.txt", False),
            ("README", False),
            ("", False),
        ],
    )
    def test_is_valid_file(self, path: str, expected: bool) -> None:
        """Test single path validation."""
        assert FileDiscoveryService().is_valid_file(path) is expected


class TestExpandPatterns:
    """Tests for pattern expansion."""

    def test_none_fails_fast(self) -> None:
        """Test that a missing pattern list is rejected."""
        calls: list[str] = []
        service = FileDiscoveryService(expand=fake_expand({}, calls))

        with pytest.raises(TypeError, match="got None"):
            service.discover_files(None)  # type: ignore[arg-type]
        assert calls == []

    def test_empty_list_skips_expansion(self) -> None:
        """Test that no expansion happens for an empty list."""
        calls: list[str] = []
        service = FileDiscoveryService(expand=fake_expand({}, calls))

        assert service.discover_files([]) == []
        assert calls == []

    def test_results_follow_pattern_order(self) -> None:
        """Test that per-pattern results are concatenated in pattern order."""
        calls: list[str] = []
        service = FileDiscoveryService(
            expand=fake_expand({"second/*": ["z.py", "y.py"], "first/*": ["b.py", "a.py"]}, calls)
        )

        assert service.discover_files(["second/*", "first/*"]) == ["z.py", "y.py", "b.py", "a.py"]
        assert calls == ["second/*", "first/*"]

    def test_patterns_are_normalized(self) -> None:
        """Test that patterns are normalized before expansion."""
        calls: list[str] = []
        service = FileDiscoveryService(expand=fake_expand({}, calls))

        service.discover_files(["./tasks//**/*.py"])

        assert calls == ["tasks/**/*.py"]

    def test_glob_on_filesystem(self, write_file: Callable[[str, str], Path], tmp_path: Path) -> None:
        """Test recursive globbing against a real directory tree."""
        write_file("tasks/payment.py")
        write_file("tasks/nested/fraud.py")
        write_file("tasks/nested/fraud.pyi")
        write_file("tasks/notes.txt")

        files = FileDiscoveryService().discover_files([str(tmp_path / "tasks" / "**" / "*")])

        assert sorted(Path(file).relative_to(tmp_path).as_posix() for file in files) == [
            "tasks/nested/fraud.py",
            "tasks/payment.py",
        ]

    def test_no_matches(self, tmp_path: Path) -> None:
        """Test a pattern matching nothing."""
        assert FileDiscoveryService().discover_files([str(tmp_path / "missing" / "*.py")]) == []
