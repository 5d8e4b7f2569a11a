# semantic_memory/analysis/types.py
"""Data types for request classification."""

from dataclasses import dataclass, field
from enum import Enum


class IntentType(Enum):
    """Kinds of action a request can imply."""

    MODIFY_EXISTING = "modify_existing"
    CREATE_NEW = "create_new"
    ENHANCE_EXISTING = "enhance_existing"
    CREATE_VARIATION = "create_variation"
    FORMAT_CONVERSION = "format_conversion"

    @classmethod
    def from_string(cls, value: str) -> "IntentType":
        """Convert string to IntentType."""
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown intent type: {value}")


@dataclass(frozen=True)
class SemanticCluster:
    """Static catalog entry describing one topic cluster."""

    name: str
    core: tuple[str, ...]
    related: tuple[str, ...]
    implications: tuple[str, ...] = ()
    typical_next_steps: tuple[str, ...] = ()


@dataclass(frozen=True)
class IntentPattern:
    """Static intent table entry."""

    name: str
    type: IntentType
    patterns: tuple[str, ...]
    confidence: float


@dataclass
class ClusterMatch:
    """Best-scoring cluster for a request."""

    cluster_name: str
    score: int
    confidence: int
    matched_core_terms: list[str] = field(default_factory=list)
    matched_related_terms: list[str] = field(default_factory=list)
    typical_next_steps: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "cluster_name": self.cluster_name,
            "score": self.score,
            "confidence": self.confidence,
            "matched_core_terms": list(self.matched_core_terms),
            "matched_related_terms": list(self.matched_related_terms),
            "typical_next_steps": list(self.typical_next_steps),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ClusterMatch":
        """Create from dictionary."""
        return cls(
            cluster_name=data["cluster_name"],
            score=data.get("score", 0),
            confidence=data.get("confidence", 0),
            matched_core_terms=data.get("matched_core_terms", []),
            matched_related_terms=data.get("matched_related_terms", []),
            typical_next_steps=data.get("typical_next_steps", []),
        )


@dataclass
class Intent:
    """A recognized action intent."""

    name: str
    type: IntentType
    confidence: float
    matched_patterns: list[str] = field(default_factory=list)
    strength: int = 0

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "type": self.type.value,
            "confidence": self.confidence,
            "matched_patterns": list(self.matched_patterns),
            "strength": self.strength,
        }
