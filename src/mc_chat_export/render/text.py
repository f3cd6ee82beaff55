"""Plain-text renderer: one display line per message."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..core.errors import RenderError
from ..core.models import ExtractedRecord, OutputFormat
from .base import require_records


@dataclass(frozen=True, slots=True)
class TextRenderer:
    format = OutputFormat.TXT

    def render(self, records: Sequence[ExtractedRecord], output: Path) -> Path:
        require_records(records, self.format)
        try:
            with output.open("w", encoding="utf-8", newline="\n") as f:
                for record in records:
                    f.write(record.display_text)
                    f.write("\n")
        except OSError as exc:
            raise RenderError(f"Unable to write {output}: {exc}") from exc
        return output
