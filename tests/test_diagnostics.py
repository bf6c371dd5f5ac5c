"""
Diagnostics Sink Test Suite
"""

import logging

from moran_abbrev.services import CollectingDiagnostics, LoggingDiagnostics


def test_collecting_sink_buffers_in_order():
    sink = CollectingDiagnostics()

    sink("first")
    sink("second")

    assert sink.messages == ["first", "second"]
    assert len(sink) == 2


def test_collecting_sink_copies_initial_messages():
    seed = ["a"]
    sink = CollectingDiagnostics(seed)

    sink("b")

    assert seed == ["a"]
    assert sink.messages == ["a", "b"]


def test_replay_forwards_every_message_in_order():
    buffered = CollectingDiagnostics(["ab: adopted 「甲乙」, demoted 「丑」", "cannot infer abbreviation of 「甲子」: missing 「子」"])
    target = CollectingDiagnostics(["earlier"])

    buffered.replay(target)

    assert target.messages == [
        "earlier",
        "ab: adopted 「甲乙」, demoted 「丑」",
        "cannot infer abbreviation of 「甲子」: missing 「子」",
    ]
    assert len(buffered) == 2


def test_clear_empties_the_buffer():
    sink = CollectingDiagnostics(["x"])

    sink.clear()

    assert sink.messages == []


def test_logging_sink_uses_package_logger(caplog):
    sink = LoggingDiagnostics(level=logging.WARNING)

    with caplog.at_level(logging.WARNING, logger="moran_abbrev"):
        sink("cannot parse full code of 「坏」")

    assert [(r.name, r.levelno, r.getMessage()) for r in caplog.records] == [
        ("moran_abbrev", logging.WARNING, "cannot parse full code of 「坏」"),
    ]
