"""Raster renderer: one line of text per message, drawn with Pillow."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from ..core.config import RenderConfig, resolve_render_config
from ..core.errors import RenderError
from ..core.models import ExtractedRecord, OutputFormat
from .base import require_records

logger = logging.getLogger(__name__)


def load_font(cfg: RenderConfig) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load the configured TTF, or Pillow's bundled font at the configured size."""
    if cfg.font_path is None:
        return ImageFont.load_default(size=cfg.font_size)
    try:
        return ImageFont.truetype(str(cfg.font_path), size=cfg.font_size)
    except OSError as exc:
        raise RenderError(f"Unable to load font {cfg.font_path}: {exc}") from exc


class ImageRenderer:
    """Render display lines top to bottom on a canvas sized to the widest line.

    The font is loaded once and used for measuring and drawing alike.
    """

    format = OutputFormat.IMAGE

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = resolve_render_config(config)
        self.font = load_font(self.config)
        ascent, descent = self.font.getmetrics()
        self.line_height = ascent + descent

    def measure_width(self, text: str) -> int:
        left, _, right, _ = self.font.getbbox(text)
        return max(0, right - left)

    def canvas_size(self, lines: Sequence[str]) -> tuple[int, int]:
        cfg = self.config
        width = max(self.measure_width(text) for text in lines) + cfg.margin
        height = (self.line_height + cfg.line_gap) * len(lines) + cfg.line_gap
        return width, height

    def draw(self, lines: Sequence[str]) -> Image.Image:
        cfg = self.config
        width, height = self.canvas_size(lines)
        logger.debug("Canvas size: %dx%d for %d line(s)", width, height, len(lines))

        image = Image.new("RGB", (width, height))
        draw = ImageDraw.Draw(image)
        x = cfg.margin // 2
        for i, text in enumerate(lines):
            y = i * (self.line_height + cfg.line_gap)
            draw.text((x, y), text, fill=cfg.text_color, font=self.font)
        return image

    def render(self, records: Sequence[ExtractedRecord], output: Path) -> Path:
        require_records(records, self.format)
        image = self.draw([record.display_text for record in records])
        try:
            image.save(output)
        except (OSError, ValueError) as exc:
            raise RenderError(f"Unable to write {output}: {exc}") from exc
        return output
