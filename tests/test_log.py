"""
Unit tests for event narration.
"""

import logging

import pytest

from algorithms import INFINITY, DistanceUpdated, Done, EdgeExamined, NodeVisited, NoUpdate
from engine import EventLog, describe, fmt_distance


def test_fmt_distance():
    assert fmt_distance(INFINITY) == "∞"
    assert fmt_distance(3) == "3"
    assert fmt_distance(3.0) == "3"
    assert fmt_distance(2.5) == "2.5"


def test_describe_each_event_kind():
    assert describe(NodeVisited(2, 1)) == "Visiting node 2 (distance 1)"
    assert describe(EdgeExamined(2, 1, 1, 4, 2)) == "→ Checking node 1 via 2→1 (weight 1): 1 + 1 = 2"
    assert describe(DistanceUpdated(1, 4, 2)) == "✔ Updating distance of node 1: 4 → 2"
    assert describe(DistanceUpdated(1, INFINITY, 4)) == "✔ Updating distance of node 1: ∞ → 4"
    assert describe(NoUpdate(1)) == "⛔ No update for node 1"
    assert describe(Done()).startswith("✅ Dijkstra complete")


def test_describe_rejects_unknown_events():
    with pytest.raises(TypeError):
        describe(object())


def test_event_log_explains_no_update_with_last_comparison():
    log = EventLog()
    log.write(EdgeExamined(0, 2, 3, 2, 3))
    line = log.write(NoUpdate(2))
    assert line == "⛔ No update for node 2 (current 2, candidate 3)"
    assert len(log) == 2
    assert log.text().endswith(line)


def test_event_log_mirrors_to_logging(caplog):
    log = EventLog()
    with caplog.at_level(logging.DEBUG, logger="engine.log"):
        log.write(NodeVisited(0, 0))
    assert "Visiting node 0 (distance 0)" in caplog.text


def test_clear_forgets_last_comparison():
    log = EventLog()
    log.write(EdgeExamined(0, 2, 3, 2, 3))
    log.clear()
    assert log.write(NoUpdate(2)) == "⛔ No update for node 2"
