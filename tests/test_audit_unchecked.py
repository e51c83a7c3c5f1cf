"""End-to-end tests for the audit command."""

import json
from pathlib import Path

import pytest

from unchecked_audit.audit_unchecked import main

FILE_A = """\
pub unsafe fn push_unchecked(v: &mut Vec<u8>, x: u8) {
    v.push(x);
}
"""

FILE_B = """\
pub struct Stack {
    items: Vec<u8>,
}

impl Stack {
    pub unsafe fn pop_unchecked(&mut self) -> u8 {
        self.items.pop().unwrap()
    }

    pub fn pop(&mut self) -> Option<u8> {
        self.items.pop()
    }
}
"""


@pytest.fixture
def crate(tmp_path: Path) -> Path:
    """Create a two-file source tree."""
    root = tmp_path / "library"
    (root / "b").mkdir(parents=True)
    (root / "a.rs").write_text(FILE_A, encoding="utf-8")
    (root / "b" / "stack.rs").write_text(FILE_B, encoding="utf-8")
    return root


def _rows(report: Path) -> list[list[str]]:
    lines = report.read_text(encoding="utf-8").splitlines()[2:]
    return [[cell.strip() for cell in line.strip("|").split("|")] for line in lines]


def test_end_to_end_scenario(crate: Path, tmp_path: Path) -> None:
    """Verify the report pairs pop and flags push as absent."""
    report = tmp_path / "out" / "report.txt"
    assert main([str(crate), "--output", str(report)]) == 0
    assert _rows(report) == [
        [str(crate / "a.rs"), "push_unchecked", "None"],
        [str(crate / "b" / "stack.rs"), "pop_unchecked", "pop"],
    ]


def test_reruns_are_byte_identical(crate: Path, tmp_path: Path) -> None:
    """Verify two runs over the same tree produce identical reports."""
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    main([str(crate), "--output", str(first), "--workers", "1"])
    main([str(crate), "--output", str(second), "--workers", "4"])
    assert first.read_bytes() == second.read_bytes()


def test_parse_failure_writes_no_report(crate: Path, tmp_path: Path) -> None:
    """Verify a fatal error leaves no report behind."""
    (crate / "broken.rs").write_text("fn broken_unchecked( {\n", encoding="utf-8")
    report = tmp_path / "report.txt"
    assert main([str(crate), "--output", str(report)]) == 1
    assert not report.exists()


def test_skip_errors_reports_remaining_files(crate: Path, tmp_path: Path) -> None:
    """Verify skip mode still reports the parsable files."""
    (crate / "broken.rs").write_text("fn broken_unchecked( {\n", encoding="utf-8")
    report = tmp_path / "report.txt"
    summary = tmp_path / "summary.json"
    args = [str(crate), "--output", str(report), "--skip-errors"]
    assert main([*args, "--summary-json", str(summary)]) == 0
    assert len(_rows(report)) == 2
    meta = json.loads(summary.read_text(encoding="utf-8"))["meta"]
    assert meta["skipped_files"] == [str(crate / "broken.rs")]
    assert meta["files_scanned"] == 2


def test_custom_marker(crate: Path, tmp_path: Path) -> None:
    """Verify the marker can be changed from the command line."""
    (crate / "raw.rs").write_text("fn read_raw() {}\nfn read() {}\n", encoding="utf-8")
    report = tmp_path / "report.txt"
    assert main([str(crate), "--output", str(report), "--marker", "_raw"]) == 0
    assert _rows(report) == [[str(crate / "raw.rs"), "read_raw", "read"]]


def test_missing_root_exits(tmp_path: Path) -> None:
    """Verify a missing root directory exits with a message."""
    with pytest.raises(SystemExit, match="not found"):
        main([str(tmp_path / "absent"), "--output", str(tmp_path / "r.txt")])


def test_invalid_config_fails(crate: Path, tmp_path: Path) -> None:
    """Verify configuration errors fail the run without a report."""
    config = tmp_path / "audit.yml"
    config.write_text("workers: 0\n", encoding="utf-8")
    report = tmp_path / "report.txt"
    assert main([str(crate), "--config", str(config), "--output", str(report)]) == 1
    assert not report.exists()


def test_unsupported_item_syntax_still_audited(crate: Path, tmp_path: Path) -> None:
    """Verify a file with an auto trait is audited rather than rejected."""
    (crate / "marker.rs").write_text(
        "pub unsafe auto trait Send {}\n"
        "pub unsafe fn get_unchecked() {}\n"
        "pub fn get() {}\n",
        encoding="utf-8",
    )
    report = tmp_path / "report.txt"
    assert main([str(crate), "--output", str(report)]) == 0
    assert [str(crate / "marker.rs"), "get_unchecked", "get"] in _rows(report)


def test_unwritable_output_fails(crate: Path, tmp_path: Path) -> None:
    """Verify a report path that cannot be written exits with status 1."""
    report = tmp_path / "report.txt"
    report.mkdir()
    assert main([str(crate), "--output", str(report)]) == 1
