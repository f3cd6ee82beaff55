"""Dedicated/integrated server chat lines."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base import TIMESTAMP_PREFIX, USER_MARKER


@dataclass(frozen=True, slots=True)
class ServerChatShape:
    """'[05Jul2025 12:41:12.295] [Server thread/INFO] [net.minecraft.server.MinecraftServer/]: <Alice> hi'."""

    name = "server_chat"
    pattern = re.compile(
        TIMESTAMP_PREFIX
        + r"\[Server thread/INFO\] \[net\.minecraft\.server\.MinecraftServer/\]: "
        + USER_MARKER
    )

    def match(self, line: str) -> bool:
        return self.pattern.match(line) is not None
