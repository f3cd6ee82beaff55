"""Error taxonomy for the extraction and rendering pipeline.

Every failure aborts the run; nothing here is retried.
"""

from __future__ import annotations


class ChatExportError(Exception):
    """Base class for all pipeline errors."""


class InputError(ChatExportError):
    """Input path is missing or cannot be read."""


class ExtractionError(ChatExportError):
    """A classified line could not be split into timestamp and message.

    This means the shape patterns and the extractor disagree, which is a bug
    rather than bad input.
    """

    field = "field"

    def __init__(self, line_no: int, line: str) -> None:
        self.line_no = line_no
        self.line = line
        super().__init__(f"Line {line_no}: unable to extract {self.field} from {line!r}")


class MissingTimestampError(ExtractionError):
    field = "timestamp"


class MissingMessageError(ExtractionError):
    field = "message"


class SelectionError(ChatExportError):
    """Externally supplied selection cannot be applied."""


class IndexOutOfBoundsError(SelectionError):
    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        bound = f"0..{count - 1}" if count else "no messages"
        super().__init__(f"Selected index {index} is out of range ({bound})")


class RenderError(ChatExportError):
    """Output could not be produced."""


class EmptySelectionError(RenderError):
    def __init__(self, fmt: str) -> None:
        self.format = fmt
        super().__init__(f"Nothing to render as {fmt}: no chat messages selected")
