"""Utility for rendering resolution results as a pipe-delimited text table.

Column widths are the longest cell plus padding, with the header cells
counted too. A table whose values are all shorter than their headers
therefore stays aligned, where sizing from the result rows alone would let
the header overflow its column.
"""

from collections.abc import Iterable, Sequence

from unchecked_audit.resolution_result import ResolutionResult

DEFAULT_HEADERS = ["File Path", "Unchecked Function", "Safe Function"]
COLUMN_PADDING = 2


def report_rows(results: Iterable[ResolutionResult]) -> list[list[str]]:
    """Return one row per result, sorted by path, name and counterpart."""
    return sorted([r.path, r.name, r.counterpart_label] for r in results)


def render_report(
    results: Iterable[ResolutionResult], headers: Sequence[str] | None = None
) -> str:
    """Render a header row, a dash separator and one row per result."""
    headers = list(headers or DEFAULT_HEADERS)
    if len(headers) != len(DEFAULT_HEADERS):
        msg = f"Expected {len(DEFAULT_HEADERS)} headers, got {len(headers)}"
        raise ValueError(msg)

    rows = report_rows(results)
    widths = [
        max(len(cell) for cell in column) + COLUMN_PADDING
        for column in zip(headers, *rows)
    ]

    def line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(c.ljust(w) for c, w in zip(cells, widths)) + " |"

    out = [line(headers), "|" + "|".join("-" * w for w in widths) + "|"]
    out.extend(line(r) for r in rows)
    return "\n".join(out) + "\n"
