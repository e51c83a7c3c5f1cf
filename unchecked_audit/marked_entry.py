"""Data model for declarations carrying the unchecked marker."""

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class MarkedEntry:
    """A marked declaration name together with the file that declares it."""

    path: str
    name: str
