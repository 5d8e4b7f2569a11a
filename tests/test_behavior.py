# tests/test_behavior.py
"""Tests for behavior archetypes."""

import pytest


@pytest.mark.parametrize("history,expected", [
    (["улучши", "еще раз", "сделай лучше"], "perfectionist"),
    (["быстро", "готово, пойдет"], "efficient"),
    (["попробуй другие варианты"], "explorer"),
    (["логотип для кофейни"], None),
    ([], None),
])
def test_identify_user_pattern(history, expected):
    from semantic_memory.prediction.behavior import identify_user_pattern

    assert identify_user_pattern(history) == expected


def test_indicators_count_per_entry():
    from semantic_memory.prediction.behavior import score_archetypes

    scores = score_archetypes(["улучши", "улучши", "попробуй"])

    assert scores == {"perfectionist": 2, "efficient": 0, "explorer": 1}


def test_tie_goes_to_first_archetype():
    from semantic_memory.prediction.behavior import identify_user_pattern

    assert identify_user_pattern(["улучши", "попробуй"]) == "perfectionist"


def test_explorer_prediction():
    from semantic_memory.prediction.behavior import behavioral_predictions

    predictions = behavioral_predictions(["а что если попробуй варианты"], project_id="p1")

    assert len(predictions) == 1
    assert predictions[0].action == "try_variations"
    assert predictions[0].probability == 0.70
    assert predictions[0].confidence == 0.65
    assert predictions[0].project_id == "p1"


def test_efficient_users_get_no_prediction():
    from semantic_memory.prediction.behavior import behavioral_predictions

    assert behavioral_predictions(["быстро", "сразу"]) == []
