"""Data types for next-step prediction."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class PredictionRule:
    """One candidate next action for a concept type in a given phase."""

    action: str
    description: str
    probability: float
    keywords: tuple[str, ...] = ()
    benefits: str = ""
    prompt_templates: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "PredictionRule":
        return cls(
            action=data["action"],
            description=data["description"],
            probability=float(data["probability"]),
            keywords=tuple(k.lower() for k in data.get("keywords", [])),
            benefits=data.get("benefits", ""),
            prompt_templates=tuple(data.get("prompt_templates", [])),
        )


@dataclass
class Prediction:
    """A ranked guess at the user's next action."""

    action: str
    description: str
    probability: float
    confidence: float
    benefits: str = ""
    suggested_prompts: list[str] = field(default_factory=list)
    keywords: list[str] = field(default_factory=list)
    project_id: Optional[str] = None
    source: str = "rule"

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "description": self.description,
            "probability": self.probability,
            "confidence": self.confidence,
            "benefits": self.benefits,
            "suggested_prompts": list(self.suggested_prompts),
            "keywords": list(self.keywords),
            "project_id": self.project_id,
            "source": self.source,
        }
