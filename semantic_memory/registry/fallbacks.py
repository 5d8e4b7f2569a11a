"""Canonical fallback implementation for each analyzer role."""

from typing import Optional

from semantic_memory.registry.base import Analyzer, Classifier, IntentRecognizer, Predictor

FALLBACK_CONFIDENCE = 0.3


class FallbackClassifier(Classifier):
    """Never matches a cluster."""

    def classify(self, text: str):
        return None


class FallbackIntentMatcher(IntentRecognizer):
    """Recognizes no intents."""

    def match_intents(self, text: str) -> list:
        return []


class FallbackPredictor(Predictor):
    """Predicts nothing."""

    def predict(self, project, context: Optional[dict] = None, now=None) -> list:
        return []


class FallbackAnalyzer(Analyzer):
    """Low-confidence placeholder result."""

    def analyze(self, text: str, context: Optional[dict] = None) -> dict:
        return {"confidence": FALLBACK_CONFIDENCE, "fallback": True}


FALLBACKS = {
    "classifier": FallbackClassifier,
    "intents": FallbackIntentMatcher,
    "predictor": FallbackPredictor,
    "analyzer": FallbackAnalyzer,
}
