"""Known chat-log line shapes.

Contains the layouts written by the server console and by the game client.
"""

from __future__ import annotations

from .base import LogShape
from .client import ClientChatComponentShape, ClientChatShape
from .loose import LooseChatShape
from .server import ServerChatShape


def default_shapes() -> tuple[LogShape, ...]:
    """Shapes checked unless a caller supplies its own set."""
    return (
        ServerChatShape(),
        ClientChatComponentShape(),
        ClientChatShape(),
    )


__all__ = [
    "ClientChatComponentShape",
    "ClientChatShape",
    "LogShape",
    "LooseChatShape",
    "ServerChatShape",
    "default_shapes",
]
