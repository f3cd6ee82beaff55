"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from mc_chat_export.core.config import BASE_DIR_ENV
from mc_chat_export.core.shapes import LooseChatShape, default_shapes
from mc_chat_export.tools.export import ChatListing, base_dir, safe_resolve

ALLOWED_FILE_SUFFIXES = {".log", ".txt"}
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

SAMPLE_LOG = (
    "[16:53:40] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] Alice joined the game\n"
    "[16:53:44] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Alice> anyone up for the end?\n"
    "[16:53:50] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Bob> yo\n"
    "[16:53:51] [Render thread/WARN] [minecraft/ModelManager]: Missing textures in model\n"
    "[16:53:58] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Alice> bring beds\n"
)


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    if _allowed_suffix(resolved) not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved


def _open_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def shape_patterns() -> dict[str, dict[str, Any]]:
    """Return every known shape with its pattern and default status."""
    out: dict[str, dict[str, Any]] = {}
    for shape in default_shapes():
        out[shape.name] = {"pattern": shape.pattern.pattern, "default": True}
    loose = LooseChatShape()
    out[loose.name] = {"pattern": loose.pattern.pattern, "default": False}
    return out


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://chat-export/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://chat-export/help\n"
            "- app://chat-export/shapes\n"
            "- app://chat-export/schemas/chat-message\n"
            "- app://chat-export/examples/sample-log\n"
            f"- log://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            f"\nBase directory: {base_dir()}\n"
        )

    @mcp.resource("app://chat-export/examples/sample-log")
    def sample_log() -> str:
        """Return a tiny client log with chat and non-chat lines."""
        return SAMPLE_LOG

    @mcp.resource("app://chat-export/shapes")
    def shapes() -> dict[str, dict[str, Any]]:
        """Return the chat line patterns recognised by the classifier."""
        return shape_patterns()

    @mcp.resource("app://chat-export/schemas/chat-message")
    def chat_listing_schema() -> dict[str, Any]:
        """Return the JSON schema of list_chat_messages results."""
        return ChatListing.model_json_schema()

    @mcp.resource("log://{path}")
    async def read_log(path: str) -> str:
        """Return the full log contents."""
        p = _resolve_resource_path(path)
        return await asyncio.to_thread(_open_text, p)
