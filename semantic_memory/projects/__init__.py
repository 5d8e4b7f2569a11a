"""Session-scoped projects and their lifecycle phases."""

from semantic_memory.projects.artifacts import Artifact, ArtifactType
from semantic_memory.projects.phases import ProjectPhase, detect_phase
from semantic_memory.projects.models import Project, ProjectContext
from semantic_memory.projects.repository import InMemoryProjectRepository, ProjectRepository
from semantic_memory.projects.store import ProjectStore

__all__ = [
    "Artifact",
    "ArtifactType",
    "ProjectPhase",
    "detect_phase",
    "Project",
    "ProjectContext",
    "InMemoryProjectRepository",
    "ProjectRepository",
    "ProjectStore",
]
