# tests/test_fusion.py
"""Tests for confidence fusion."""

from unittest.mock import Mock

import pytest


def test_no_factors_is_zero():
    from semantic_memory.orchestrator.fusion import fuse

    assert fuse(None, [], None, 0.0) == 0


def test_project_presence_alone():
    from semantic_memory.orchestrator.fusion import fuse

    assert fuse(None, [], Mock(), 0.0) == 14


def test_average_over_active_factors():
    from semantic_memory.orchestrator.fusion import fuse

    cluster = Mock(confidence=80)
    intent = Mock(confidence=0.4)

    # (24 + 10 + 10 + 14) / 4 = 14.5
    assert fuse(cluster, [intent], Mock(), 0.4) == 15


def test_best_intent_is_used():
    from semantic_memory.orchestrator.fusion import fuse

    intents = [Mock(confidence=0.2), Mock(confidence=0.8)]

    assert fuse(None, intents, None, 0.0) == 20


def test_rounds_half_up():
    from semantic_memory.orchestrator.fusion import fuse

    # 0.1 * 100 * 0.25 = 2.5
    assert fuse(None, [Mock(confidence=0.1)], None, 0.0) == 3


def test_zero_confidence_factors_are_inactive():
    from semantic_memory.orchestrator.fusion import fuse

    assert fuse(Mock(confidence=0), [Mock(confidence=0.0)], Mock(), 0.0) == 14


@pytest.mark.parametrize("cluster_conf,intent_conf,context_conf", [
    (100, 1.0, 1.0),
    (1000, 50.0, 9.0),
    (1, 0.01, 0.01),
])
def test_result_is_bounded(cluster_conf, intent_conf, context_conf):
    from semantic_memory.orchestrator.fusion import fuse

    score = fuse(Mock(confidence=cluster_conf), [Mock(confidence=intent_conf)], Mock(), context_conf)

    assert 0 <= score <= 100
    assert isinstance(score, int)
