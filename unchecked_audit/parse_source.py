"""Logic for reading a Rust source file into a tree-sitter syntax tree.

The grammar lags behind the language, so valid Rust such as ``auto trait``,
``pub macro`` or ``where [(); N]:`` comes back with ERROR regions. A region is
tolerated, with a warning, when error recovery kept it apart from every
function and impl declaration. Otherwise the file is a ParseError.
"""

import logging
from pathlib import Path

import tree_sitter_rust as tsrust
from tree_sitter import Language, Node, Parser, Tree

from unchecked_audit.errors import ParseError, SourceReadError

logger = logging.getLogger(__name__)

RUST_LANGUAGE = Language(tsrust.language())

DECLARATION_NODES = {"function_item", "impl_item"}
DECLARATION_KEYWORDS = {"fn", "impl"}


def parse_source(path: str) -> Tree:
    """Read and parse a Rust file, failing on errors that touch declarations."""
    try:
        code = Path(path).read_bytes()
    except OSError as exc:
        raise SourceReadError(path, exc.strerror or str(exc)) from exc

    # Parser instances are not shared between threads.
    tree = Parser(RUST_LANGUAGE).parse(code)
    if tree.root_node.has_error:
        for region in error_regions(tree.root_node):
            line = region.start_point[0] + 1
            if overlaps_declaration(region):
                raise ParseError(path, line)
            logger.warning("Unsupported syntax in %s near line %d, skipped", path, line)
    return tree


def error_regions(root: Node) -> list[Node]:
    """Return the outermost ERROR nodes and all MISSING nodes, in source order."""
    regions = []
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            regions.append(node)
            continue
        stack.extend(reversed([c for c in node.children if c.has_error]))
    return regions


def overlaps_declaration(region: Node) -> bool:
    """Whether an error region sits inside or swallows a function or impl."""
    ancestor = region.parent
    while ancestor is not None:
        if ancestor.type in DECLARATION_NODES:
            return True
        ancestor = ancestor.parent

    stack = [region]
    while stack:
        node = stack.pop()
        if node.type in DECLARATION_NODES or node.type in DECLARATION_KEYWORDS:
            return True
        stack.extend(node.children)
    return False
