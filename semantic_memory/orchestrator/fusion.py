"""Confidence fusion - combines component signals into one 0-100 score."""

import math
from typing import Optional, Sequence

CLUSTER_WEIGHT = 0.30
INTENT_WEIGHT = 0.25
PROJECT_CONTEXT_WEIGHT = 0.25
PROJECT_PRESENCE_WEIGHT = 0.20
PROJECT_PRESENCE_SCORE = 70


def fuse(cluster_match=None, intents: Optional[Sequence] = None, project=None, project_context_confidence: float = 0.0) -> int:
    """
    Weighted mean of the active confidence factors.

    Each factor counts only when present and positive. The weighted sum is
    divided by the number of active factors, rounded half up and clamped
    to [0, 100]; no active factor gives 0.
    """
    factors = []

    if cluster_match is not None and cluster_match.confidence > 0:
        factors.append(cluster_match.confidence * CLUSTER_WEIGHT)

    if intents:
        best = max(intent.confidence for intent in intents)
        if best > 0:
            factors.append(best * 100 * INTENT_WEIGHT)

    if project_context_confidence and project_context_confidence > 0:
        factors.append(project_context_confidence * 100 * PROJECT_CONTEXT_WEIGHT)

    if project is not None:
        factors.append(PROJECT_PRESENCE_SCORE * PROJECT_PRESENCE_WEIGHT)

    if not factors:
        return 0

    score = math.floor(sum(factors) / len(factors) + 0.5)
    return max(0, min(100, score))
