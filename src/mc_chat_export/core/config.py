"""Startup configuration objects and environment overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from .shapes import LogShape

ENV_PREFIX = "CHAT_EXPORT_"
LOG_LEVEL_ENV = f"{ENV_PREFIX}LOG_LEVEL"
FONT_PATH_ENV = f"{ENV_PREFIX}FONT_PATH"
MAX_WORKERS_ENV = f"{ENV_PREFIX}MAX_WORKERS"
BASE_DIR_ENV = f"{ENV_PREFIX}BASE_DIR"


@dataclass(frozen=True, slots=True)
class ClassifierConfig:
    include_loose: bool = False
    # Appended after the built-in shapes.
    extra_shapes: tuple[LogShape, ...] = ()


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Image layout. Measurement and drawing both use these values."""

    font_path: Path | None = None  # None -> Pillow's bundled font
    font_size: int = 40
    margin: int = 8  # total horizontal margin; text starts at margin // 2
    line_gap: int = 4
    text_color: tuple[int, int, int] = (254, 254, 254)


def resolve_render_config(cfg: RenderConfig | None) -> RenderConfig:
    """Return config with the font path env override applied."""
    if cfg is None:
        cfg = RenderConfig()
    if cfg.font_size < 1:
        raise ValueError("font_size must be >= 1")
    if cfg.font_path is not None:
        return cfg

    env = os.getenv(FONT_PATH_ENV)
    if not env:
        return cfg
    return replace(cfg, font_path=Path(env).expanduser())


def configure_logging(default_level: str = "WARNING", *, verbose: bool = False) -> None:
    """Configure root logging from CHAT_EXPORT_LOG_LEVEL."""
    level_name = "DEBUG" if verbose else os.getenv(LOG_LEVEL_ENV, default_level).upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
