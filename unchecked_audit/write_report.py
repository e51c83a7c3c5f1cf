"""Logic for writing report files without leaving partial output behind."""

import os
from pathlib import Path

from unchecked_audit.errors import ReportWriteError


def write_report(path: Path, text: str) -> None:
    """Write text to path atomically via a temporary sibling file."""
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)
    except OSError as exc:
        raise ReportWriteError(str(path), exc.strerror or str(exc)) from exc
    finally:
        if tmp.exists():
            tmp.unlink()
