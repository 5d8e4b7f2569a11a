# semantic_memory/analysis/classifier.py
"""Semantic cluster classifier - weighted keyword scoring."""

import logging
from typing import Optional, Sequence

from semantic_memory.analysis.catalog import (
    CLUSTERS,
    CONFIDENCE_MULTIPLIER,
    CORE_KEYWORD_WEIGHT,
    MAX_CLUSTER_CONFIDENCE,
    RELATED_KEYWORD_WEIGHT,
)
from semantic_memory.analysis.types import ClusterMatch, SemanticCluster
from semantic_memory.registry.base import Classifier

logger = logging.getLogger(__name__)


class ClusterClassifier(Classifier):
    """
    Scores a request against the static cluster catalog.

    Scoring:
    1. +10 for every core keyword contained in the lower-cased text
    2. +5 for every related keyword contained in it
    3. Highest score wins; the first declared cluster wins a tie
    4. confidence = min(score * 8, 100)
    """

    def __init__(self, clusters: Optional[Sequence[SemanticCluster]] = None):
        self.clusters = tuple(clusters) if clusters is not None else CLUSTERS

    def score_cluster(self, text: str, cluster: SemanticCluster) -> ClusterMatch:
        """Score one cluster against already lower-cased text."""
        matched_core = [kw for kw in cluster.core if kw in text]
        matched_related = [kw for kw in cluster.related if kw in text]
        score = len(matched_core) * CORE_KEYWORD_WEIGHT + len(matched_related) * RELATED_KEYWORD_WEIGHT

        return ClusterMatch(
            cluster_name=cluster.name,
            score=score,
            confidence=min(score * CONFIDENCE_MULTIPLIER, MAX_CLUSTER_CONFIDENCE),
            matched_core_terms=matched_core,
            matched_related_terms=matched_related,
            typical_next_steps=list(cluster.typical_next_steps),
        )

    def score_all(self, text: str) -> list[ClusterMatch]:
        """Score every cluster, in catalog order, including zero scores."""
        lowered = text.lower()
        return [self.score_cluster(lowered, cluster) for cluster in self.clusters]

    def classify(self, text: str) -> Optional[ClusterMatch]:
        best = None
        for match in self.score_all(text):
            # strict > keeps the earlier cluster on a tie
            if match.score > 0 and (best is None or match.score > best.score):
                best = match

        if best is None:
            logger.debug("No cluster matched")
            return None

        logger.debug(
            f"Cluster {best.cluster_name}: score={best.score}, confidence={best.confidence}"
        )
        return best
