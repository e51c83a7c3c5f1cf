"""Logic for loading, merging and validating audit configuration."""

import copy
from pathlib import Path
from typing import Any

import yaml

from unchecked_audit.deep_merge import deep_merge
from unchecked_audit.errors import ConfigError
from unchecked_audit.report_table import DEFAULT_HEADERS

ON_ERROR_POLICIES = ("fail", "skip")

DEFAULT_CONFIG: dict[str, Any] = {
    "scan": {
        "extension": ".rs",
        "exclude_dirs": [],
    },
    "marker": "_unchecked",
    "workers": 8,
    "on_error": "fail",
    "report": {
        "output": "safe_version_results.txt",
        "headers": list(DEFAULT_HEADERS),
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if not p.exists():
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        try:
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            msg = f"Invalid YAML in {path}: {exc}"
            raise ConfigError(msg) from exc
        if not isinstance(user_config, dict):
            msg = f"Config file {path} must contain a mapping"
            raise ConfigError(msg)
        config = deep_merge(config, user_config)
    validate_config(config)
    return config


def validate_config(config: dict[str, Any]) -> None:
    """Raise ConfigError if a setting cannot drive an audit run."""
    if not isinstance(config.get("marker"), str) or not config["marker"]:
        msg = "'marker' must be a non-empty string"
        raise ConfigError(msg)
    workers = config.get("workers")
    if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
        msg = f"'workers' must be a positive integer, got {workers!r}"
        raise ConfigError(msg)
    if config.get("on_error") not in ON_ERROR_POLICIES:
        msg = f"'on_error' must be one of {ON_ERROR_POLICIES}"
        raise ConfigError(msg)
    if not str(config["scan"].get("extension", "")).startswith("."):
        msg = "'scan.extension' must start with a dot"
        raise ConfigError(msg)
    if len(config["report"].get("headers") or []) != len(DEFAULT_HEADERS):
        msg = f"'report.headers' must list {len(DEFAULT_HEADERS)} column titles"
        raise ConfigError(msg)
