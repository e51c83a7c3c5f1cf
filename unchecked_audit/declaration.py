"""Data models for function-like declarations found in Rust sources."""

from dataclasses import dataclass
from enum import Enum


class DeclarationKind(str, Enum):
    """Structural form of a function-like declaration."""

    FUNCTION = "function"  # free function, at any nesting depth
    METHOD = "method"  # associated function inside an impl block


@dataclass(frozen=True)
class Declaration:
    """A single function or method declaration."""

    name: str
    kind: DeclarationKind
    line: int  # 1-based, for diagnostics only
