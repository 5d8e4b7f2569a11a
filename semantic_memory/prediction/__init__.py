"""Next-step prediction for projects."""

from semantic_memory.prediction.types import Prediction, PredictionRule
from semantic_memory.prediction.rules import RuleBook, map_concept_to_type
from semantic_memory.prediction.behavior import identify_user_pattern, behavioral_predictions
from semantic_memory.prediction.predictor import NextStepPredictor

__all__ = [
    "Prediction",
    "PredictionRule",
    "RuleBook",
    "map_concept_to_type",
    "identify_user_pattern",
    "behavioral_predictions",
    "NextStepPredictor",
]
