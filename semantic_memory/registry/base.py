# semantic_memory/registry/base.py
"""Abstract base classes for the pluggable analyzer roles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from semantic_memory.analysis.types import ClusterMatch, Intent


class Classifier(ABC):
    """Assigns a request to a topic cluster."""

    @abstractmethod
    def classify(self, text: str) -> Optional[ClusterMatch]:
        """
        Classify request text.

        Args:
            text: Raw user request

        Returns:
            Best ClusterMatch, or None when nothing matched
        """
        pass


class IntentRecognizer(ABC):
    """Recognizes the action intents of a request."""

    @abstractmethod
    def match_intents(self, text: str) -> list[Intent]:
        """Return matched intents sorted by confidence, highest first."""
        pass


class Predictor(ABC):
    """Predicts a project's likely next steps."""

    @abstractmethod
    def predict(self, project, context: Optional[dict] = None, now=None) -> list:
        """
        Rank candidate next actions for a project.

        Args:
            project: Project to predict for
            context: Request context (recentQueries, userBehaviorHistory, ...)
            now: Reference time; defaults to the current UTC time

        Returns:
            Predictions sorted by probability, highest first
        """
        pass


class Analyzer(ABC):
    """Optional plug-in that enriches the analysis result."""

    @abstractmethod
    def analyze(self, text: str, context: Optional[dict] = None) -> dict:
        """Return a partial result merged under the analyzer's name."""
        pass
