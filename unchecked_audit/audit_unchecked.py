"""Audit a Rust source tree for unchecked functions lacking a checked counterpart.

Every free function or impl method whose name contains the marker (by default
``_unchecked``) is paired with the declaration named without the marker in
the same file, or reported as ``None`` when there is none.
"""

import argparse
import logging
from pathlib import Path

from unchecked_audit.errors import AuditError
from unchecked_audit.run_audit import run_audit

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    ap = argparse.ArgumentParser(
        description=(
            "Report unchecked Rust functions and whether a checked counterpart "
            "exists in the same file."
        ),
    )
    ap.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path("library"),
        help="Root directory to scan for *.rs files (default: library)",
    )
    ap.add_argument(
        "--output",
        type=Path,
        help="Report file to write (default: safe_version_results.txt)",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--marker",
        help="Marker substring flagging unchecked declarations (default: _unchecked)",
    )
    ap.add_argument(
        "--workers",
        type=int,
        help="Number of worker threads for parsing (default: 8)",
    )
    ap.add_argument(
        "--skip-errors",
        action="store_true",
        help="Skip unreadable or unparsable files instead of aborting",
    )
    ap.add_argument(
        "--summary-json",
        help="Also write a JSON summary of the run to this path",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every processed file",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the audit from the command line."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_audit(args)
    except AuditError as exc:
        logger.error("Audit failed: %s", exc)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
