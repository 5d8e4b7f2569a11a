"""User behavior archetypes inferred from request history."""

from dataclasses import dataclass
from typing import Optional, Sequence

from semantic_memory.prediction.types import Prediction


@dataclass(frozen=True)
class BehaviorArchetype:
    name: str
    indicators: tuple[str, ...]
    action: Optional[str] = None
    description: str = ""
    probability: float = 0.0
    confidence: float = 0.0


# Declaration order breaks score ties
BEHAVIOR_ARCHETYPES = (
    BehaviorArchetype(
        name="perfectionist",
        indicators=("измени", "улучши", "еще раз", "по-другому", "лучше"),
        action="request_modifications",
        description="Вероятны запросы на доработку и улучшения",
        probability=0.75,
        confidence=0.7,
    ),
    BehaviorArchetype(
        name="efficient",
        indicators=("быстро", "сразу", "готово", "пойдет", "нормально"),
    ),
    BehaviorArchetype(
        name="explorer",
        indicators=("попробуй", "а что если", "варианты", "эксперименты"),
        action="try_variations",
        description="Интерес к альтернативным вариантам и экспериментам",
        probability=0.70,
        confidence=0.65,
    ),
)


def score_archetypes(history: Sequence[str]) -> dict[str, int]:
    """Count indicator hits per archetype across all history entries."""
    scores = {}
    for archetype in BEHAVIOR_ARCHETYPES:
        score = 0
        for entry in history:
            text = entry.lower()
            score += sum(1 for indicator in archetype.indicators if indicator in text)
        scores[archetype.name] = score
    return scores


def identify_user_pattern(history: Sequence[str]) -> Optional[str]:
    """Name of the best scoring archetype, or None when nothing matched."""
    if not history:
        return None
    scores = score_archetypes(history)
    best = max(scores.values())
    if best == 0:
        return None
    return next(name for name, score in scores.items() if score == best)


def behavioral_predictions(history: Sequence[str], project_id: Optional[str] = None) -> list[Prediction]:
    """Predictions implied by the user's archetype. Efficient users get none."""
    pattern = identify_user_pattern(history)
    if pattern is None:
        return []

    archetype = next(a for a in BEHAVIOR_ARCHETYPES if a.name == pattern)
    if archetype.action is None:
        return []

    return [
        Prediction(
            action=archetype.action,
            description=archetype.description,
            probability=archetype.probability,
            confidence=archetype.confidence,
            project_id=project_id,
            source="behavioral",
        )
    ]
