"""Logic for aggregating marked declarations across a source tree."""

import logging
import threading
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from unchecked_audit.declaration_visitor import DeclarationVisitor
from unchecked_audit.errors import ParseError, SourceReadError
from unchecked_audit.marked_entry import MarkedEntry
from unchecked_audit.parse_source import parse_source

logger = logging.getLogger(__name__)


class MarkerCollector:
    """Thread-safe, deduplicated set of marked entries for one audit run."""

    def __init__(
        self, visitor: DeclarationVisitor, *, skip_errors: bool = False
    ) -> None:
        """Initialize an empty collector.

        With skip_errors, unreadable or malformed files are logged and left out
        instead of aborting the run.
        """
        self.visitor = visitor
        self.skip_errors = skip_errors
        self.entries: set[MarkedEntry] = set()
        self.files_scanned = 0
        self.skipped: list[str] = []
        self._lock = threading.Lock()

    def collect(self, path: str) -> None:
        """Parse one file and merge its marked entries into the shared set."""
        logger.info("Processing file: %s", path)
        try:
            tree = parse_source(path)
        except (SourceReadError, ParseError) as exc:
            if not self.skip_errors:
                raise
            logger.warning("Skipping file: %s", exc)
            with self._lock:
                self.skipped.append(path)
            return

        found = self.visitor.visit(tree, path)
        with self._lock:
            self.entries.update(found)
            self.files_scanned += 1

    def collect_all(self, paths: Iterable[Path | str], workers: int = 1) -> None:
        """Collect from many files, one task per file."""
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [pool.submit(self.collect, str(p)) for p in paths]
            for future in as_completed(futures):
                try:
                    future.result()
                except Exception:
                    for pending in futures:
                        pending.cancel()
                    raise
