"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: list chat messages in a log, export a selection of them
- Resources: shapes, schemas, sample log, log contents via URI
- Prompts: reusable export workflow

Run locally (stdio):
    python -m mc_chat_export.server.chat_server
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mc_chat_export.core.config import configure_logging
from mc_chat_export.prompts.registry import register_prompts
from mc_chat_export.resources.registry import register_resources
from mc_chat_export.tools.export import export_chat_impl, list_chat_messages_impl

LOGGER = logging.getLogger(__name__)

mcp = FastMCP("mc-chat-export", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def list_chat_messages(
    log_path: str,
    include_loose: bool = False,
    limit: int | None = None,
) -> dict[str, Any]:
    """Return the chat messages found in a log file, in file order.

    Parameters
    ----------
    log_path:
        Path to a local log file (plain text or .gz), relative to the base directory.
    include_loose:
        Also accept any timestamped line containing '<name> '. Useful for modded
        servers, may include non-chat lines.
    limit:
        Maximum number of messages returned (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"count": int, "messages": list[dict]}
    """
    return await list_chat_messages_impl(log_path=log_path, include_loose=include_loose, limit=limit)


@mcp.tool()
async def export_chat(
    log_path: str,
    output_path: str,
    format: str = "txt",
    indices: Sequence[int] | None = None,
    include_loose: bool = False,
) -> dict[str, Any]:
    """Render chat messages from a log file into a txt, csv or image file.

    Parameters
    ----------
    log_path:
        Path to a local log file (plain text or .gz).
    output_path:
        Where to write the result, relative to the base directory.
    format:
        One of "txt", "csv", "image".
    indices:
        Indices from list_chat_messages. Empty or omitted exports everything.
    include_loose:
        Must match the value used with list_chat_messages for indices to line up.

    Returns
    -------
    dict:
        {"output_path": str, "format": str, "count": int}
    """
    return await export_chat_impl(
        log_path=log_path,
        output_path=output_path,
        format=format,
        indices=indices,
        include_loose=include_loose,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    configure_logging("INFO")
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
