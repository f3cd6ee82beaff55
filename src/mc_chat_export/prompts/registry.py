"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def export_chat_highlights(
        log_path: str,
        output_path: str,
        format: str = "image",
        topic: str = "",
    ) -> list[dict[str, Any]]:
        """Build a prompt that picks notable chat messages and exports them."""
        focus = f"Focus on messages about: {topic}\n" if topic else ""
        return [
            {
                "role": "system",
                "content": (
                    "You help players export chat from game logs. Only use messages returned "
                    "by the tools; never invent or edit chat lines."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Export the interesting part of this chat log. Follow this workflow:\n"
                    f"- Call list_chat_messages with log_path={log_path!r}.\n"
                    "- If count is 0, say so and stop. Suggest include_loose=true if the log "
                    "comes from a modded server with a custom layout.\n"
                    f"{focus}"
                    "- Pick the message indices worth keeping (a conversation, a funny moment).\n"
                    f"- Call export_chat with output_path={output_path!r}, format={format!r} "
                    "and the chosen indices. Output is always in log order.\n"
                    "- Reply with the output path and the exported lines.\n"
                ),
            },
        ]
