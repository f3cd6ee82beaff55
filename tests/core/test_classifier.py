from __future__ import annotations

import pytest

from conftest import CLIENT_COMPONENT_LINE, CLIENT_LINE, NOISE_LINES, SERVER_LINE
from mc_chat_export.core.classifier import build_classifier, is_possible_chat_message
from mc_chat_export.core.config import ClassifierConfig
from mc_chat_export.core.extractor import ChatExtractor
from mc_chat_export.core.shapes import LooseChatShape, default_shapes

# One accepted line per shape, including awkward message bodies.
SHAPE_LINES = {
    "server_chat": [
        SERVER_LINE,
        "[05Jul2025 12:41:13.001] [Server thread/INFO] "
        "[net.minecraft.server.MinecraftServer/]: <Bob_99> look <here> [ok]",
        "[05Jul2025 12:41:14.500] [Server thread/INFO] "
        "[net.minecraft.server.MinecraftServer/]: <Alice> ",
    ],
    "client_chat_component": [
        CLIENT_COMPONENT_LINE,
        "[16:53:52] [Render thread/INFO] [minecraft/ChatComponent]: [CHAT] <Bob> a > b, <c> d",
    ],
    "client_chat": [
        CLIENT_LINE,
        "[21:07:30] [Render thread/INFO]: [CHAT] <Carol> [ZDASH] Tower: Tall Boy (103)",
    ],
    "loose": [
        "[12:00:00] [Async Chat Thread - #0/INFO]: <Dave> paper server chat",
        "[16:53:51] [Render thread/WARN] [minecraft/ModelManager]: Missing model minecraft:block/<unknown> x",
    ],
}


@pytest.mark.parametrize(
    "line",
    [line for shape in ("server_chat", "client_chat_component", "client_chat") for line in SHAPE_LINES[shape]],
)
def test_default_shapes_accept_chat(line: str) -> None:
    assert is_possible_chat_message(line)


@pytest.mark.parametrize("line", NOISE_LINES)
def test_default_shapes_reject_noise(line: str) -> None:
    assert not is_possible_chat_message(line)


def test_classify_reports_matching_shape() -> None:
    classifier = build_classifier()
    for name, lines in SHAPE_LINES.items():
        if name == "loose":
            continue
        for line in lines:
            shape = classifier.classify(line)
            assert shape is not None
            assert shape.name == name


def test_loose_shape_is_opt_in() -> None:
    default = build_classifier()
    loose = build_classifier(ClassifierConfig(include_loose=True))

    assert "loose" not in [s.name for s in default.shapes]
    assert [s.name for s in loose.shapes][-1] == "loose"
    for line in SHAPE_LINES["loose"]:
        assert not default.is_possible_chat_message(line)
        assert loose.is_possible_chat_message(line)


def test_loose_does_not_shadow_specific_shapes() -> None:
    classifier = build_classifier(ClassifierConfig(include_loose=True))
    shape = classifier.classify(SERVER_LINE)
    assert shape is not None
    assert shape.name == "server_chat"


def test_shape_order_does_not_change_acceptance() -> None:
    forward = build_classifier()
    backward = type(forward)(shapes=tuple(reversed(forward.shapes)))
    for line in [*NOISE_LINES, SERVER_LINE, CLIENT_LINE, CLIENT_COMPONENT_LINE]:
        assert forward.is_possible_chat_message(line) == backward.is_possible_chat_message(line)


@pytest.mark.parametrize("shape", [*default_shapes(), LooseChatShape()], ids=lambda s: s.name)
def test_every_accepted_line_can_be_extracted(shape) -> None:
    extractor = ChatExtractor()
    lines = SHAPE_LINES[shape.name]
    assert lines
    for line in lines:
        assert shape.match(line)
        record = extractor.extract(line, line_no=1, shape=shape.name)
        assert record.message.startswith("<")
        assert 1 <= len(record.timestamp_parts) <= 2


@pytest.mark.parametrize("shape", [*default_shapes(), LooseChatShape()], ids=lambda s: s.name)
def test_noise_accepted_by_a_shape_can_be_extracted(shape) -> None:
    extractor = ChatExtractor()
    for line in NOISE_LINES:
        if shape.match(line):
            extractor.extract(line)
