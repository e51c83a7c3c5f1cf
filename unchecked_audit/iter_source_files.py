"""Utility for discovering source files beneath a root directory."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from unchecked_audit.errors import SourceReadError


def iter_source_files(
    root: Path, extension: str = ".rs", exclude_dirs: Iterable[str] = ()
) -> Iterator[Path]:
    """Yield files under root carrying the extension, in sorted order.

    Any file whose relative path passes through a directory named in
    exclude_dirs is skipped.
    """
    if not root.is_dir():
        raise SourceReadError(str(root), "not a directory")
    excluded = set(exclude_dirs)
    for path in sorted(root.rglob(f"*{extension}")):
        if excluded.intersection(path.relative_to(root).parts[:-1]):
            continue
        if path.is_file():
            yield path
