"""Chat extraction core: shapes, classification, extraction and selection."""

from __future__ import annotations

from .classifier import ChatClassifier, build_classifier, is_possible_chat_message
from .config import ClassifierConfig, RenderConfig, resolve_render_config
from .errors import (
    ChatExportError,
    EmptySelectionError,
    ExtractionError,
    IndexOutOfBoundsError,
    InputError,
    MissingMessageError,
    MissingTimestampError,
    RenderError,
    SelectionError,
)
from .extractor import ChatExtractor, extract
from .log_service import get_records, iter_records
from .models import ExtractedRecord, OutputFormat
from .selection import (
    AllSelector,
    IndexSelector,
    PromptSelector,
    Selector,
    parse_index_spec,
    resolve_selection,
)

__all__ = [
    "AllSelector",
    "ChatClassifier",
    "ChatExportError",
    "ChatExtractor",
    "ClassifierConfig",
    "EmptySelectionError",
    "ExtractedRecord",
    "ExtractionError",
    "IndexOutOfBoundsError",
    "IndexSelector",
    "InputError",
    "MissingMessageError",
    "MissingTimestampError",
    "OutputFormat",
    "PromptSelector",
    "RenderConfig",
    "RenderError",
    "SelectionError",
    "Selector",
    "build_classifier",
    "extract",
    "get_records",
    "is_possible_chat_message",
    "iter_records",
    "parse_index_spec",
    "resolve_render_config",
    "resolve_selection",
]
