# semantic_memory/projects/models.py
"""Data types for session-scoped projects."""

import uuid
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from semantic_memory.projects.artifacts import Artifact, ArtifactType, utcnow
from semantic_memory.projects.phases import ProjectPhase, detect_phase


@dataclass
class Project:
    """A session-scoped group of related requests and their artifacts."""

    session_id: str
    title: str
    concept: str
    artifacts: list[Artifact] = field(default_factory=list)
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    @property
    def phase(self) -> ProjectPhase:
        """Recomputed from artifacts on every read."""
        return detect_phase(self.artifacts)

    @property
    def latest_artifact(self) -> Optional[Artifact]:
        return self.artifacts[-1] if self.artifacts else None

    def has_artifact_type(self, artifact_type: ArtifactType) -> bool:
        return any(a.type == artifact_type for a in self.artifacts)

    def progress_summary(self) -> dict:
        """Artifact counts by type plus the current phase."""
        counts = Counter(a.type.value for a in self.artifacts)
        return {
            "phase": self.phase.value,
            "artifacts_count": len(self.artifacts),
            "artifacts_by_type": dict(counts),
        }

    def to_dict(self) -> dict:
        """Snapshot for results and storage."""
        return {
            "id": self.id,
            "session_id": self.session_id,
            "title": self.title,
            "concept": self.concept,
            "phase": self.phase.value,
            "artifacts": [a.to_dict() for a in self.artifacts],
            "artifacts_count": len(self.artifacts),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        """Create from dictionary; a stored phase is ignored."""
        created_at = datetime.fromisoformat(data["created_at"])
        updated_at = data.get("updated_at")
        return cls(
            id=data["id"],
            session_id=data["session_id"],
            title=data.get("title", ""),
            concept=data.get("concept", "general"),
            artifacts=[Artifact.from_dict(a) for a in data.get("artifacts", [])],
            created_at=created_at,
            updated_at=datetime.fromisoformat(updated_at) if updated_at else created_at,
        )


@dataclass
class ProjectContext:
    """Routing decision made for one request."""

    project: Project
    is_new_project: bool
    confidence: float = 0.0
    reasons: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "project_id": self.project.id,
            "is_new_project": self.is_new_project,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
        }
