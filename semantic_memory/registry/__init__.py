"""Analyzer roles, their fallbacks and the module registry."""

from semantic_memory.registry.base import Analyzer, Classifier, IntentRecognizer, Predictor
from semantic_memory.registry.fallbacks import (
    FallbackAnalyzer,
    FallbackClassifier,
    FallbackIntentMatcher,
    FallbackPredictor,
)
from semantic_memory.registry.registry import (
    DEFAULT_MODULES,
    ModuleHealth,
    ModuleRegistry,
    ModuleSpec,
)

__all__ = [
    "Analyzer",
    "Classifier",
    "IntentRecognizer",
    "Predictor",
    "FallbackAnalyzer",
    "FallbackClassifier",
    "FallbackIntentMatcher",
    "FallbackPredictor",
    "DEFAULT_MODULES",
    "ModuleHealth",
    "ModuleRegistry",
    "ModuleSpec",
]
