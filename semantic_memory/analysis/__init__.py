"""Request classification: clusters, intents and context enrichment."""

from semantic_memory.analysis.types import (
    ClusterMatch,
    Intent,
    IntentPattern,
    IntentType,
    SemanticCluster,
)
from semantic_memory.analysis.classifier import ClusterClassifier
from semantic_memory.analysis.intents import IntentMatcher, best_intent
from semantic_memory.analysis.enrichment import ContextEnricher

__all__ = [
    "ClusterMatch",
    "Intent",
    "IntentPattern",
    "IntentType",
    "SemanticCluster",
    "ClusterClassifier",
    "IntentMatcher",
    "best_intent",
    "ContextEnricher",
]
