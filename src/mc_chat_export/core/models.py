"""Core data models for chat extraction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class OutputFormat(str, Enum):
    """Output sinks a set of records can be rendered into."""

    TXT = "txt"
    CSV = "csv"
    IMAGE = "image"


@dataclass(frozen=True, slots=True)
class ExtractedRecord:
    """One chat message pulled out of a single classified log line."""

    line_no: int
    timestamp_parts: tuple[str, ...]  # (date, time) or (time,)
    message: str  # "<user> body", verbatim to end of line
    shape: str | None = None  # name of the shape that accepted the line

    @property
    def timestamp(self) -> str:
        """Bracketed timestamp token as it appeared in the log."""
        return f"[{' '.join(self.timestamp_parts)}]"

    @property
    def display_text(self) -> str:
        """Canonical one-line form used by text and image output."""
        return f"{self.timestamp} {self.message}"

    @property
    def date(self) -> str:
        if len(self.timestamp_parts) > 1:
            return self.timestamp_parts[0]
        return ""

    @property
    def time(self) -> str:
        return self.timestamp_parts[-1]
