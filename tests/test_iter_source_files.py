"""Tests for source file discovery."""

from pathlib import Path

import pytest

from unchecked_audit.errors import SourceReadError
from unchecked_audit.iter_source_files import iter_source_files


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """Create a small directory tree with mixed file types."""
    (tmp_path / "core" / "slice").mkdir(parents=True)
    (tmp_path / "target" / "debug").mkdir(parents=True)
    (tmp_path / "lib.rs").write_text("", encoding="utf-8")
    (tmp_path / "core" / "slice" / "mod.rs").write_text("", encoding="utf-8")
    (tmp_path / "core" / "README.md").write_text("", encoding="utf-8")
    (tmp_path / "target" / "debug" / "build.rs").write_text("", encoding="utf-8")
    return tmp_path


def test_recursive_discovery_filters_extension(tree: Path) -> None:
    """Verify only .rs files are yielded, recursively and in sorted order."""
    found = [p.relative_to(tree).as_posix() for p in iter_source_files(tree)]
    assert found == ["core/slice/mod.rs", "lib.rs", "target/debug/build.rs"]


def test_exclude_dirs(tree: Path) -> None:
    """Verify excluded directories are pruned."""
    found = [p.name for p in iter_source_files(tree, exclude_dirs=["target"])]
    assert found == ["mod.rs", "lib.rs"]


def test_restartable(tree: Path) -> None:
    """Verify a second walk yields the same sequence."""
    assert list(iter_source_files(tree)) == list(iter_source_files(tree))


def test_missing_root(tmp_path: Path) -> None:
    """Verify a missing root raises SourceReadError."""
    with pytest.raises(SourceReadError):
        list(iter_source_files(tmp_path / "absent"))
