"""Data model for the outcome of a counterpart lookup."""

from dataclasses import dataclass

ABSENT_LABEL = "None"


@dataclass(frozen=True)
class ResolutionResult:
    """Pairs a marked declaration with its checked counterpart, if any."""

    path: str
    name: str
    counterpart: str | None = None  # None when the file has no counterpart

    @property
    def counterpart_label(self) -> str:
        """Return the counterpart name, or the absent label."""
        return self.counterpart if self.counterpart is not None else ABSENT_LABEL
