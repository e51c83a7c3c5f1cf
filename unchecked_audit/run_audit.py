"""Orchestration logic for auditing unchecked functions in a Rust source tree."""

import argparse
import logging
from pathlib import Path
from typing import Any

from unchecked_audit.audit_summary import AuditSummary
from unchecked_audit.compute_config_hash import compute_config_hash
from unchecked_audit.counterpart_resolver import CounterpartResolver
from unchecked_audit.declaration_visitor import DeclarationVisitor
from unchecked_audit.iter_source_files import iter_source_files
from unchecked_audit.load_config import load_config, validate_config
from unchecked_audit.marker_collector import MarkerCollector
from unchecked_audit.report_table import render_report
from unchecked_audit.write_report import write_report

logger = logging.getLogger(__name__)


def run_audit(args: argparse.Namespace) -> int:
    """Execute the full collect, resolve and report pipeline."""
    root: Path = args.root
    if not root.is_dir():
        msg = f"Source directory not found: {root}"
        raise SystemExit(msg)

    config = _init_config(args)
    scan = config["scan"]
    paths = list(iter_source_files(root, scan["extension"], scan["exclude_dirs"]))
    if not paths:
        logger.warning("No %s files found under: %s", scan["extension"], root)

    skip_errors = config["on_error"] == "skip"
    collector = MarkerCollector(
        DeclarationVisitor(config["marker"]), skip_errors=skip_errors
    )
    collector.collect_all(paths, workers=config["workers"])
    logger.info(
        "Found %d marked declarations in %d files",
        len(collector.entries),
        collector.files_scanned,
    )

    resolver = CounterpartResolver(config["marker"], skip_errors=skip_errors)
    results = resolver.resolve(collector.entries, workers=config["workers"])

    output = Path(config["report"]["output"])
    write_report(output, render_report(results, config["report"]["headers"]))

    if args.summary_json:
        summary = AuditSummary(compute_config_hash(config))
        for result in results:
            summary.add_result(result)
        summary.generate_summary(
            args.summary_json,
            files_scanned=collector.files_scanned,
            skipped=collector.skipped + resolver.skipped,
        )

    print(f"Safe version results have been written to {output}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load configuration and apply command-line overrides."""
    config = load_config(args.config)
    if args.output:
        config["report"]["output"] = str(args.output)
    if args.marker:
        config["marker"] = args.marker
    if args.workers is not None:
        config["workers"] = args.workers
    if args.skip_errors:
        config["on_error"] = "skip"
    validate_config(config)
    return config
