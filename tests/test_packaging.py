"""Tests for package dependencies."""

import ast
from pathlib import Path

import pytest

ROOT = Path(__file__).parent.parent
PACKAGE = ROOT / "src" / "bstree"


def imported_modules(path):
    tree = ast.parse(path.read_text(encoding="utf-8"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name.split(".")[0]
        elif isinstance(node, ast.ImportFrom) and node.level == 0:
            yield node.module.split(".")[0]


class TestDependencies:
    """Test runtime dependencies match what the library imports."""

    def test_library_does_not_import_numpy(self):
        """Test no library module needs numpy."""
        for path in PACKAGE.glob("*.py"):
            assert "numpy" not in set(imported_modules(path)), path.name

    def test_numpy_is_optional(self):
        """Test numpy is only declared in the optional extras."""
        tomllib = pytest.importorskip("tomllib")
        project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
        assert project["dependencies"] == ["sortedcontainers"]
        assert "numpy" in project["optional-dependencies"]["scripts"]
        assert "numpy" in project["optional-dependencies"]["test"]
