"""Shape interface shared by every known chat-log line layout."""

from __future__ import annotations

import re
from typing import Protocol

# Every shape starts with a bracketed timestamp and ends its required part on
# a "<user> " marker. The extractor relies on both being present.
TIMESTAMP_PREFIX = r"^\[[^\]]*\] "
USER_MARKER = r"<.*> "


class LogShape(Protocol):
    """A named line layout: match() says whether a line has this shape."""

    name: str
    pattern: re.Pattern[str]

    def match(self, line: str) -> bool:
        """Return True if the line has this shape."""
        ...
