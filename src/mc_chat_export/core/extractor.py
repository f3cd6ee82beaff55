"""Second pass: split an accepted line into timestamp and message."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .errors import MissingMessageError, MissingTimestampError
from .models import ExtractedRecord


@dataclass(frozen=True, slots=True)
class ChatExtractor:
    """Pull the leading '[...]' timestamp and the '<user> body' message out of a line."""

    _time_re = re.compile(r"^\[(.*?)\]")
    # Greedy from the first '<'; message text may contain more brackets.
    _msg_re = re.compile(r"<.*> .*")

    def extract(self, line: str, *, line_no: int = 0, shape: str | None = None) -> ExtractedRecord:
        """Return the record for a classified line.

        Raises MissingTimestampError / MissingMessageError when the line lacks
        either part, which only happens if a shape accepts lines it should not.
        """
        tm = self._time_re.match(line)
        if tm is None:
            raise MissingTimestampError(line_no, line)
        mm = self._msg_re.search(line)
        if mm is None:
            raise MissingMessageError(line_no, line)

        # "05Jul2025 12:41:12.295" -> 2 parts, "16:53:50" -> 1 part
        parts = tuple(tm.group(1).split(" ", 1))
        return ExtractedRecord(
            line_no=line_no,
            timestamp_parts=parts,
            message=mm.group(0),
            shape=shape,
        )


_DEFAULT = ChatExtractor()


def extract(line: str, *, line_no: int = 0, shape: str | None = None) -> ExtractedRecord:
    """Extract with the shared default extractor."""
    return _DEFAULT.extract(line, line_no=line_no, shape=shape)
