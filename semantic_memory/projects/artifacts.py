"""Artifacts produced for a project."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ArtifactType(Enum):
    """Kinds of artifact a project can accumulate."""

    IMAGE = "image"
    VECTOR = "vector"
    EMBROIDERY = "embroidery"
    MOCKUP = "mockup"
    TEXT = "text"
    OTHER = "other"

    @classmethod
    def from_string(cls, value: str) -> "ArtifactType":
        """Convert string to ArtifactType, defaulting to OTHER."""
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        return cls.OTHER


@dataclass(frozen=True)
class Artifact:
    """Something produced for a project."""

    type: ArtifactType
    description: str = ""
    created_at: datetime = field(default_factory=utcnow)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "description": self.description,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Artifact":
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = datetime.fromisoformat(created_at)
        return cls(
            type=ArtifactType.from_string(data.get("type", "other")),
            description=data.get("description", ""),
            created_at=created_at or utcnow(),
        )
