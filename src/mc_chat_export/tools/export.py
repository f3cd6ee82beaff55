"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from mc_chat_export.core.classifier import build_classifier
from mc_chat_export.core.config import BASE_DIR_ENV, ClassifierConfig
from mc_chat_export.core.log_service import get_records
from mc_chat_export.core.models import ExtractedRecord, OutputFormat
from mc_chat_export.core.selection import resolve_selection
from mc_chat_export.render import render_records

DEFAULT_LIMIT = 500
HARD_LIMIT = 5000


class ChatMessage(BaseModel):
    index: int = Field(description="Zero-based index; pass it to export_chat to select this message.")
    line_no: int = Field(description="1-based line number in the log file.")
    timestamp_parts: list[str] = Field(description="[date, time] or [time] as logged.")
    message: str = Field(description="'<user> body' exactly as logged.")
    display_text: str = Field(description="Timestamp and message on one line.")
    shape: str | None = Field(default=None, description="Name of the log layout that matched.")


class ChatListing(BaseModel):
    count: int = Field(description="Total chat messages in the file.")
    messages: list[ChatMessage] = Field(default_factory=list)


class ExportResult(BaseModel):
    output_path: str
    format: OutputFormat
    count: int = Field(description="Number of messages written.")


def base_dir() -> Path:
    """Return the resolved base directory for tool and resource paths."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def _to_message(index: int, record: ExtractedRecord) -> ChatMessage:
    return ChatMessage(
        index=index,
        line_no=record.line_no,
        timestamp_parts=list(record.timestamp_parts),
        message=record.message,
        display_text=record.display_text,
        shape=record.shape,
    )


async def list_chat_messages_impl(
    *,
    log_path: str,
    include_loose: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `list_chat_messages` MCP tool."""
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    limit = min(limit, HARD_LIMIT)

    records = await get_records(
        safe_resolve(log_path),
        classifier=build_classifier(ClassifierConfig(include_loose=include_loose)),
    )
    listing = ChatListing(
        count=len(records),
        messages=[_to_message(i, r) for i, r in enumerate(records[:limit])],
    )
    return listing.model_dump()


async def export_chat_impl(
    *,
    log_path: str,
    output_path: str,
    format: str = "txt",
    indices: Sequence[int] | None = None,
    include_loose: bool = False,
) -> dict[str, Any]:
    """Implementation for the `export_chat` MCP tool.

    Notes
    -----
    - indices refer to list_chat_messages output; empty/None exports everything
    - output is always written in file order, whatever order indices come in
    """
    try:
        fmt = OutputFormat(format.strip().lower())
    except ValueError as e:
        valid = ", ".join(f.value for f in OutputFormat)
        raise ValueError(f"Unknown format '{format}'. Valid values: {valid}.") from e

    records = await get_records(
        safe_resolve(log_path),
        classifier=build_classifier(ClassifierConfig(include_loose=include_loose)),
    )
    selected = resolve_selection(indices, records)
    out = render_records(fmt, selected, safe_resolve(output_path))
    return ExportResult(output_path=str(out), format=fmt, count=len(selected)).model_dump(
        mode="json"
    )
