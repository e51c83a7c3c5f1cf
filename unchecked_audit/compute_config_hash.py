"""Logic for fingerprinting the settings that shape an audit report."""

import hashlib
import json
from typing import Any

# Keys that change which rows a report contains or how they read. Thread count
# and output locations are left out so they never change the fingerprint.
REPORT_KEYS = ("marker", "on_error", "scan")
REPORT_SUBKEYS = ("headers",)


def report_settings(config: dict[str, Any]) -> dict[str, Any]:
    """Return the subset of the config that determines report content."""
    settings = {key: config.get(key) for key in REPORT_KEYS}
    report = config.get("report") or {}
    settings["report"] = {key: report.get(key) for key in REPORT_SUBKEYS}
    return settings


def compute_config_hash(config: dict[str, Any]) -> str:
    """Return a SHA-256 hex digest of the report settings, ignoring key order."""
    canonical = json.dumps(report_settings(config), sort_keys=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()
