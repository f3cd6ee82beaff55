"""Output sinks for extracted chat records."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from ..core.config import RenderConfig
from ..core.models import ExtractedRecord, OutputFormat
from .base import Renderer, require_records
from .image import ImageRenderer
from .table import CsvRenderer
from .text import TextRenderer


def get_renderer(fmt: OutputFormat | str, render_config: RenderConfig | None = None) -> Renderer:
    """Return the renderer for an output format."""
    fmt = OutputFormat(fmt)
    if fmt is OutputFormat.IMAGE:
        return ImageRenderer(render_config)
    if fmt is OutputFormat.CSV:
        return CsvRenderer()
    return TextRenderer()


def render_records(
    fmt: OutputFormat | str,
    records: Sequence[ExtractedRecord],
    output: str | Path,
    *,
    render_config: RenderConfig | None = None,
) -> Path:
    """Render records with the renderer for fmt."""
    return get_renderer(fmt, render_config).render(records, Path(output))


__all__ = [
    "CsvRenderer",
    "ImageRenderer",
    "Renderer",
    "TextRenderer",
    "get_renderer",
    "render_records",
    "require_records",
]
