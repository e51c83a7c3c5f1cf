"""Logic for generating a JSON summary of an audit run."""

import json
import time
from pathlib import Path
from typing import Any

from unchecked_audit.resolution_result import ResolutionResult
from unchecked_audit.write_report import write_report


class AuditSummary:
    """Collects resolution results and summarizes how many lack a counterpart."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the summary with the effective config fingerprint."""
        self.config_hash = config_hash
        self.results: list[ResolutionResult] = []
        self.start_time = time.time()

    def add_result(self, result: ResolutionResult) -> None:
        """Add a single resolution result to the summary."""
        self.results.append(result)

    def generate_summary(
        self, path: str, files_scanned: int, skipped: list[str] | None = None
    ) -> None:
        """Write the summary to a JSON file."""
        ordered = sorted(
            self.results, key=lambda r: (r.path, r.name, r.counterpart_label)
        )
        summary = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "files_scanned": files_scanned,
                "skipped_files": sorted(skipped or []),
                "total_entries": len(self.results),
            },
            "results": [
                {"path": r.path, "name": r.name, "counterpart": r.counterpart}
                for r in ordered
            ],
            "stats": self._compute_stats(),
        }
        write_report(Path(path), json.dumps(summary, indent=2))

    def _compute_stats(self) -> dict[str, Any]:
        missing_by_file: dict[str, int] = {}
        paired = 0
        for r in self.results:
            if r.counterpart is None:
                missing_by_file[r.path] = missing_by_file.get(r.path, 0) + 1
            else:
                paired += 1

        total = len(self.results)
        missing = total - paired
        return {
            "paired": paired,
            "missing": missing,
            "missing_share": (missing / total) if total > 0 else 0,
            "missing_by_file": dict(sorted(missing_by_file.items())),
        }
