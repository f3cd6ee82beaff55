"""CSV renderer with a date,time,msg header."""

from __future__ import annotations

import csv
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from ..core.errors import RenderError
from ..core.models import ExtractedRecord, OutputFormat
from .base import require_records

HEADER = ("date", "time", "msg")


@dataclass(frozen=True, slots=True)
class CsvRenderer:
    """Time-only timestamps get an empty date column."""

    format = OutputFormat.CSV

    def render(self, records: Sequence[ExtractedRecord], output: Path) -> Path:
        require_records(records, self.format)
        try:
            with output.open("w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f)
                writer.writerow(HEADER)
                writer.writerows(row(record) for record in records)
        except OSError as exc:
            raise RenderError(f"Unable to write {output}: {exc}") from exc
        return output


def row(record: ExtractedRecord) -> tuple[str, str, str]:
    return record.date, record.time, record.message
