"""Pytest configuration and shared fixtures."""

import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from uuid6 import uuid7

from parallel_tasks.task_registry import MetadataRegistry, get_registry, reset_registry


@pytest.fixture(autouse=True)
def clean_registry() -> Generator[None, None, None]:
    """Start and finish every test with a fresh process-wide registry."""
    reset_registry()
    yield
    reset_registry()


@pytest.fixture(autouse=True)
def isolated_sys_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Undo sys.path entries added by package imports."""
    monkeypatch.setattr(sys, "path", list(sys.path))


@pytest.fixture
def registry() -> MetadataRegistry:
    """Return the process-wide registry."""
    return get_registry()


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write a dedented file below tmp_path, creating parent directories."""

    def _write(relative_path: str, content: str = "") -> Path:
        path = tmp_path / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(content))
        return path

    return _write


@pytest.fixture
def package_name() -> str:
    """Return a package name no other test has imported."""
    return f"handlers_{uuid7().hex}"
