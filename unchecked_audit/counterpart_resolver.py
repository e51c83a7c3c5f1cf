"""Logic for pairing marked declarations with their checked counterparts."""

import logging
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed

from unchecked_audit.counterpart_name import counterpart_name
from unchecked_audit.errors import ParseError, ResolutionError, SourceReadError
from unchecked_audit.iter_declarations import iter_declarations
from unchecked_audit.marked_entry import MarkedEntry
from unchecked_audit.parse_source import parse_source
from unchecked_audit.resolution_result import ResolutionResult

logger = logging.getLogger(__name__)


class CounterpartResolver:
    """Looks up the counterpart of each marked entry in its own file.

    Only declarations in the same file count. The owning file is parsed
    again, so the result reflects its content at resolution time.
    """

    def __init__(self, marker: str, *, skip_errors: bool = False) -> None:
        """Initialize the resolver with the marker to strip."""
        self.marker = marker
        self.skip_errors = skip_errors
        self.skipped: list[str] = []
        self._lock = threading.Lock()

    def resolve_entry(self, entry: MarkedEntry) -> ResolutionResult:
        """Resolve a single entry on its own."""
        return self._resolve_file(entry.path, [entry])[0]

    def resolve(
        self, entries: Iterable[MarkedEntry], workers: int = 1
    ) -> set[ResolutionResult]:
        """Resolve all entries, one task per owning file.

        Each call returns results for the given entries only.
        """
        results: set[ResolutionResult] = set()
        by_path: dict[str, list[MarkedEntry]] = {}
        for entry in sorted(entries):
            by_path.setdefault(entry.path, []).append(entry)

        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(self._resolve_into, results, path, group)
                for path, group in by_path.items()
            ]
            for future in as_completed(futures):
                try:
                    future.result()
                except Exception:
                    for pending in futures:
                        pending.cancel()
                    raise

        return results

    def _resolve_into(
        self, results: set[ResolutionResult], path: str, entries: list[MarkedEntry]
    ) -> None:
        try:
            resolved = self._resolve_file(path, entries)
        except ResolutionError as exc:
            if not self.skip_errors:
                raise
            logger.warning("Skipping file: %s (%s)", exc, exc.__cause__)
            with self._lock:
                self.skipped.append(path)
            return

        with self._lock:
            results.update(resolved)

    def _resolve_file(
        self, path: str, entries: list[MarkedEntry]
    ) -> list[ResolutionResult]:
        try:
            tree = parse_source(path)
        except (SourceReadError, ParseError) as exc:
            raise ResolutionError(path, [e.name for e in entries]) from exc

        declared = {decl.name for decl in iter_declarations(tree.root_node)}
        resolved = []
        for entry in entries:
            wanted = counterpart_name(entry.name, self.marker)
            found = wanted if wanted in declared else None
            if found is None:
                logger.debug("No counterpart %s for %s in %s", wanted, entry.name, path)
            resolved.append(ResolutionResult(path, entry.name, found))
        return resolved
