"""First pass: decide which raw lines could be chat messages."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .config import ClassifierConfig
from .shapes import LogShape, LooseChatShape, default_shapes

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChatClassifier:
    """Accept a line if any configured shape matches it."""

    shapes: Sequence[LogShape]

    def classify(self, line: str) -> LogShape | None:
        """Return the first shape that matches, or None."""
        for shape in self.shapes:
            if shape.match(line):
                return shape
        return None

    def is_possible_chat_message(self, line: str) -> bool:
        return self.classify(line) is not None


def build_classifier(cfg: ClassifierConfig | None = None) -> ChatClassifier:
    """Build the classifier for a run from its config."""
    cfg = cfg or ClassifierConfig()
    shapes: list[LogShape] = list(default_shapes())
    shapes.extend(cfg.extra_shapes)
    if cfg.include_loose:
        shapes.append(LooseChatShape())
    logger.debug("Chat shapes: %s", ", ".join(s.name for s in shapes))
    return ChatClassifier(shapes=tuple(shapes))


_DEFAULT = build_classifier()


def is_possible_chat_message(line: str, classifier: ChatClassifier | None = None) -> bool:
    """Return True if the line matches any shape of the (default) classifier."""
    return (classifier or _DEFAULT).is_possible_chat_message(line)
