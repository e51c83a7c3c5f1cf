"""Exception types raised while auditing a source tree."""


class AuditError(Exception):
    """Base class for all failures that abort an audit run."""


class ConfigError(AuditError):
    """The merged configuration contains an invalid value."""


class SourceReadError(AuditError):
    """A source file or directory could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        """Record the path that failed and why."""
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class ParseError(AuditError):
    """A source file is not valid Rust according to the grammar."""

    def __init__(self, path: str, line: int) -> None:
        """Record the path and the first line carrying a syntax error."""
        super().__init__(f"Cannot parse {path}: syntax error near line {line}")
        self.path = path
        self.line = line


class ResolutionError(AuditError):
    """A file could not be re-read or re-parsed while resolving counterparts."""

    def __init__(self, path: str, names: list[str]) -> None:
        """Record the owning file and the marked names left unresolved."""
        super().__init__(f"Cannot resolve {', '.join(names)} in {path}")
        self.path = path
        self.names = names


class ReportWriteError(AuditError):
    """A report or summary file could not be written."""

    def __init__(self, path: str, reason: str) -> None:
        """Record the destination that failed and why."""
        super().__init__(f"Cannot write {path}: {reason}")
        self.path = path
        self.reason = reason
