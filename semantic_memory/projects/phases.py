"""Project lifecycle phases, derived from a project's artifacts."""

from enum import Enum
from typing import Sequence

from semantic_memory.projects.artifacts import ArtifactType


class ProjectPhase(Enum):
    """Lifecycle stage of a project. Derived, never stored."""

    INITIAL = "initial"
    AFTER_IMAGE_CREATION = "after_image_creation"
    AFTER_VECTORIZATION = "after_vectorization"
    DEVELOPMENT = "development"
    MATURE = "mature"

    @classmethod
    def from_string(cls, value: str) -> "ProjectPhase":
        """Convert string to ProjectPhase."""
        value = value.lower().strip()
        for member in cls:
            if member.value == value:
                return member
        raise ValueError(f"Unknown project phase: {value}")


# Artifact count above which a project without vectors is mature
MATURE_ARTIFACT_COUNT = 2


def detect_phase(artifacts: Sequence) -> ProjectPhase:
    """Derive the phase from an artifact sequence.

    Checks run in order: empty -> initial; a single image -> after image
    creation; any vector -> after vectorization; more than two artifacts ->
    mature; anything else -> development.
    """
    if not artifacts:
        return ProjectPhase.INITIAL

    types = [artifact.type for artifact in artifacts]

    if len(types) == 1 and types[0] == ArtifactType.IMAGE:
        return ProjectPhase.AFTER_IMAGE_CREATION

    if ArtifactType.VECTOR in types:
        return ProjectPhase.AFTER_VECTORIZATION

    if len(types) > MATURE_ARTIFACT_COUNT:
        return ProjectPhase.MATURE

    return ProjectPhase.DEVELOPMENT
