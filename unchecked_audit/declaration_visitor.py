"""Logic for extracting marked declarations from a parsed Rust file."""

import logging

from tree_sitter import Tree

from unchecked_audit.iter_declarations import iter_declarations
from unchecked_audit.marked_entry import MarkedEntry

logger = logging.getLogger(__name__)


class DeclarationVisitor:
    """Finds free functions and impl methods whose names contain a marker."""

    def __init__(self, marker: str) -> None:
        """Initialize the visitor with the (case-sensitive) marker substring."""
        if not marker:
            msg = "marker must be a non-empty string"
            raise ValueError(msg)
        self.marker = marker

    def visit(self, tree: Tree, path: str) -> set[MarkedEntry]:
        """Return the marked entries declared in one file."""
        found: set[MarkedEntry] = set()
        for decl in iter_declarations(tree.root_node):
            if self.marker in decl.name:
                logger.debug(
                    "Marked %s %s at %s:%d", decl.kind.value, decl.name, path, decl.line
                )
                found.add(MarkedEntry(path=path, name=decl.name))
        return found
