"""Client-side chat lines (the game client logs chat it receives)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base import TIMESTAMP_PREFIX, USER_MARKER


@dataclass(frozen=True, slots=True)
class ClientChatComponentShape:
    """'[16:53:50] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Bob> yo'."""

    name = "client_chat_component"
    pattern = re.compile(
        TIMESTAMP_PREFIX
        + r"\[Render thread/INFO\] \[minecraft/ChatComponent\]: \[CHAT\] "
        + USER_MARKER
    )

    def match(self, line: str) -> bool:
        return self.pattern.match(line) is not None


@dataclass(frozen=True, slots=True)
class ClientChatShape:
    """'[16:53:50] [Render thread/INFO]: [CHAT] <Bob> yo' (no logger channel)."""

    name = "client_chat"
    pattern = re.compile(TIMESTAMP_PREFIX + r"\[Render thread/INFO\]: \[CHAT\] " + USER_MARKER)

    def match(self, line: str) -> bool:
        return self.pattern.match(line) is not None
