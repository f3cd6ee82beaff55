from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SERVER_LINE = (
    "[05Jul2025 12:41:12.295] [Server thread/INFO] "
    "[net.minecraft.server.MinecraftServer/]: <Alice> hi"
)
CLIENT_COMPONENT_LINE = (
    "[16:53:50] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Bob> yo"
)
CLIENT_LINE = "[21:07:24] [Render thread/INFO]: [CHAT] <Carol> gg"

NOISE_LINES = [
    "",
    "[16:53:40] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] Alice joined the game",
    "[12:41:10.001] [Server thread/INFO] [net.minecraft.server.MinecraftServer/]: Alice joined the game",
    "[12:41:15.120] [Server thread/INFO] [net.minecraft.server.MinecraftServer/]: [Server] restarting soon",
    "[21:07:24] [Render thread/INFO]: [CHAT]   Time: 28.95s",
    "[16:53:51] [Render thread/WARN] [minecraft/ModelManager]: Missing model minecraft:block/<unknown> x",
    "java.lang.NullPointerException: Cannot invoke \"java.util.List<T>.size()\"",
    "\tat net.minecraft.server.MinecraftServer.runServer(MinecraftServer.java:123)",
    "[Server thread/INFO] [net.minecraft.server.MinecraftServer/]: <Alice> no timestamp",
    "[21:09:37] [Server thread/INFO]: Saving chunks for level 'ServerLevel[Zero Practice]'",
]


@pytest.fixture
def write_chat_log() -> Callable[[Path], list[str]]:
    """Write a client log with five chat lines mixed with noise; return the chat lines."""

    def _write(path: Path) -> list[str]:
        chat = [
            "[16:53:44] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Alice> anyone up?",
            "[16:53:50] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Bob> yo",
            "[16:53:52] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Alice> bring <beds> pls",
            "[16:54:01] [Render thread/INFO]: [CHAT] <Bob> ok, \"3\" of them",
            "[16:54:07] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Carol> wait for me",
        ]
        lines = [
            NOISE_LINES[1],
            chat[0],
            NOISE_LINES[5],
            chat[1],
            chat[2],
            NOISE_LINES[6],
            NOISE_LINES[7],
            chat[3],
            NOISE_LINES[4],
            chat[4],
        ]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return chat

    return _write


@pytest.fixture
def write_bytes() -> Callable[[Path, list[bytes]], None]:
    def _write(path: Path, lines: list[bytes]) -> None:
        path.write_bytes(b"".join(line + b"\n" for line in lines))

    return _write
