"""Catch-all shape. Never part of the default set."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .base import TIMESTAMP_PREFIX, USER_MARKER


@dataclass(frozen=True, slots=True)
class LooseChatShape:
    """Any timestamped line that contains a '<user> ' marker somewhere.

    Picks up chat from unknown loggers, but also diagnostics that happen to
    print angle brackets (generic types, HTML), so it is opt-in only.
    """

    name = "loose"
    pattern = re.compile(TIMESTAMP_PREFIX + r".*" + USER_MARKER)

    def match(self, line: str) -> bool:
        return self.pattern.match(line) is not None
