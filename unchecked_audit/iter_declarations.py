"""Utility for enumerating function and method declarations in a syntax tree."""

from collections.abc import Iterator

from tree_sitter import Node

from unchecked_audit.declaration import Declaration, DeclarationKind


def declaration_kind(node: Node) -> DeclarationKind | None:
    """Classify a function_item node, or return None if it is not collected.

    Functions declared directly in a trait body are trait items, not free
    functions or impl methods, and are skipped.
    """
    parent = node.parent
    if parent is not None and parent.type == "declaration_list":
        owner = parent.parent
        if owner is not None and owner.type == "impl_item":
            return DeclarationKind.METHOD
        if owner is not None and owner.type == "trait_item":
            return None
    return DeclarationKind.FUNCTION


def iter_declarations(root: Node) -> Iterator[Declaration]:
    """Yield every free function and impl method, at any nesting depth.

    Descends into modules, impl blocks, function bodies and blocks, so a
    function nested inside another function is found too.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "function_item":
            kind = declaration_kind(node)
            name_node = node.child_by_field_name("name")
            if kind is not None and name_node is not None and name_node.text:
                yield Declaration(
                    name=name_node.text.decode("utf-8"),
                    kind=kind,
                    line=node.start_point[0] + 1,
                )
        stack.extend(reversed(node.named_children))
