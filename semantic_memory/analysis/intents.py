"""Intent pattern matcher."""

import logging
from typing import Optional, Sequence

from semantic_memory.analysis.catalog import INTENT_PATTERNS
from semantic_memory.analysis.types import Intent, IntentPattern
from semantic_memory.registry.base import IntentRecognizer

logger = logging.getLogger(__name__)


class IntentMatcher(IntentRecognizer):
    """Classifies a request into action intents by phrase containment.

    confidence = base_confidence * matched / total_patterns. Several
    intents can match the same request; the caller decides how to combine.
    """

    def __init__(self, patterns: Optional[Sequence[IntentPattern]] = None):
        self.patterns = tuple(patterns) if patterns is not None else INTENT_PATTERNS

    def match_intents(self, text: str) -> list[Intent]:
        lowered = text.lower()
        intents = []

        for entry in self.patterns:
            matched = [p for p in entry.patterns if p in lowered]
            if not matched:
                continue
            intents.append(Intent(
                name=entry.name,
                type=entry.type,
                confidence=entry.confidence * (len(matched) / len(entry.patterns)),
                matched_patterns=matched,
                strength=len(matched),
            ))

        # sort is stable: equal confidences keep table order
        intents.sort(key=lambda intent: intent.confidence, reverse=True)
        logger.debug(f"Matched {len(intents)} intents")
        return intents


def best_intent(intents: Sequence[Intent]) -> Optional[Intent]:
    """Highest-confidence intent of an already sorted list, or None."""
    return intents[0] if intents else None
