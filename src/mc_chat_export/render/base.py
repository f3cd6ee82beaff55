"""Renderer interface."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from ..core.errors import EmptySelectionError
from ..core.models import ExtractedRecord, OutputFormat


class Renderer(Protocol):
    """Write an ordered, non-empty record sequence to an output file."""

    format: OutputFormat

    def render(self, records: Sequence[ExtractedRecord], output: Path) -> Path:
        """Render records to output and return the written path."""
        ...


def require_records(records: Sequence[ExtractedRecord], fmt: OutputFormat) -> None:
    """Reject an empty record sequence (same policy for every format)."""
    if not records:
        raise EmptySelectionError(fmt.value)
