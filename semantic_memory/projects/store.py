# semantic_memory/projects/store.py
"""Project state store - routes requests to projects and records artifacts."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from semantic_memory.analysis.catalog import are_related_concepts
from semantic_memory.analysis.types import Intent, IntentType
from semantic_memory.projects.artifacts import Artifact, ArtifactType, utcnow
from semantic_memory.projects.models import Project, ProjectContext
from semantic_memory.projects.repository import InMemoryProjectRepository, ProjectRepository

logger = logging.getLogger(__name__)

GENERAL_CONCEPT = "general"
MAX_TITLE_WORDS = 6

# Compatibility scoring
CONCEPT_MATCH_SCORE = 40
MODIFICATION_INTENT_SCORE = 30
CONTEXT_CHAIN_SCORE = 20
MAX_COMPATIBILITY_SCORE = 100

MODIFICATION_INTENTS = {IntentType.MODIFY_EXISTING, IntentType.ENHANCE_EXISTING}


def make_title(text: str) -> str:
    """Short project title from the request that opened it."""
    words = text.strip().split()
    title = " ".join(words[:MAX_TITLE_WORDS])
    if len(words) > MAX_TITLE_WORDS:
        title += "..."
    return title[:1].upper() + title[1:]


class ProjectStore:
    """
    Working set of per-session projects in front of a ProjectRepository.

    A request reuses the session's open project when the concepts are
    compatible and the request does not ask for new work; otherwise a new
    project is created and becomes the session's open project.
    """

    def __init__(
        self,
        repository: Optional[ProjectRepository] = None,
        idle_timeout: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
    ):
        self.repository = repository or InMemoryProjectRepository()
        self.idle_timeout = idle_timeout
        self._clock = clock

        self._projects: dict[str, list[Project]] = {}
        self._current: dict[str, str] = {}
        self._last_seen: dict[str, datetime] = {}

    def _touch(self, session_id: str) -> None:
        self._last_seen[session_id] = self._clock()

    def get_current_project(self, session_id: str) -> Optional[Project]:
        """The session's open project, loading it from the repository if needed."""
        if session_id not in self._projects:
            stored = self.repository.load_project(session_id)
            if stored is None:
                return None
            self._projects[session_id] = [stored]
            self._current[session_id] = stored.id
            self._touch(session_id)
            logger.debug(f"Loaded project {stored.id} for session {session_id}")

        current_id = self._current.get(session_id)
        for project in self._projects[session_id]:
            if project.id == current_id:
                return project
        return None

    def list_projects(self, session_id: str) -> list[Project]:
        return list(self._projects.get(session_id, []))

    def create_project(self, session_id: str, text: str, concept: Optional[str] = None) -> Project:
        """Create a project and make it the session's open project."""
        now = self._clock()
        project = Project(
            session_id=session_id,
            title=make_title(text),
            concept=concept or GENERAL_CONCEPT,
            created_at=now,
            updated_at=now,
        )
        self.repository.save_project(project)
        self._projects.setdefault(session_id, []).append(project)
        self._current[session_id] = project.id
        self._touch(session_id)
        logger.info(f"Created project {project.id} ({project.concept}) for session {session_id}")
        return project

    def resolve(
        self,
        session_id: str,
        text: str,
        concept: Optional[str],
        intents: Optional[Sequence[Intent]] = None,
        context: Optional[dict] = None,
    ) -> ProjectContext:
        """Route a request to an existing project or a new one."""
        intents = list(intents or [])
        current = self.get_current_project(session_id)

        wants_new = bool(intents) and intents[0].type == IntentType.CREATE_NEW
        compatible = current is not None and (
            concept is None or are_related_concepts(concept, current.concept)
        )

        if compatible and not wants_new:
            project, is_new = current, False
            self._touch(session_id)
        else:
            project, is_new = self.create_project(session_id, text, concept), True

        score, reasons = self.score_compatibility(project, text, concept, intents, context)
        return ProjectContext(
            project=project,
            is_new_project=is_new,
            confidence=score / 100,
            reasons=reasons,
        )

    def get_or_create_project(
        self,
        session_id: str,
        text: str,
        concept: Optional[str],
        intents: Optional[Sequence[Intent]] = None,
        context: Optional[dict] = None,
    ) -> Project:
        return self.resolve(session_id, text, concept, intents, context).project

    def score_compatibility(
        self,
        project: Project,
        text: str,
        concept: Optional[str],
        intents: Sequence[Intent],
        context: Optional[dict] = None,
    ) -> tuple[int, list[str]]:
        """Score how well a request fits a project, 0-100, with reasons."""
        context = context or {}
        score = 0
        reasons = []

        if concept and are_related_concepts(concept, project.concept):
            score += CONCEPT_MATCH_SCORE
            reasons.append(f"Compatible concepts: {concept} and {project.concept}")

        if any(intent.type in MODIFICATION_INTENTS for intent in intents):
            score += MODIFICATION_INTENT_SCORE
            reasons.append("Request modifies existing work")

        has_recent_images = context.get("hasRecentImages", context.get("has_recent_images", False))
        if (
            has_recent_images
            and "вектор" in text.lower()
            and project.has_artifact_type(ArtifactType.IMAGE)
        ):
            score += CONTEXT_CHAIN_SCORE
            reasons.append("Vectorization chain applies to the project's images")

        return min(score, MAX_COMPATIBILITY_SCORE), reasons

    def add_artifact(self, project: Project, artifact: Artifact) -> Project:
        """Append an artifact, bump updated_at and persist, in one step."""
        project.artifacts.append(artifact)
        project.updated_at = self._clock()
        self.repository.save_project(project)
        self._touch(project.session_id)
        logger.info(
            f"Added {artifact.type.value} artifact to project {project.id} "
            f"(phase: {project.phase.value})"
        )
        return project

    def add_artifact_to_current(self, session_id: str, artifact: Artifact) -> Optional[Project]:
        """Append to the session's open project; None when there is none."""
        project = self.get_current_project(session_id)
        if project is None:
            return None
        return self.add_artifact(project, artifact)

    def evict_inactive(self, now: Optional[datetime] = None) -> int:
        """Drop idle sessions from the working set. Stored projects are kept."""
        now = now or self._clock()
        idle = [
            session_id
            for session_id, last_seen in self._last_seen.items()
            if now - last_seen > self.idle_timeout
        ]
        for session_id in idle:
            self._projects.pop(session_id, None)
            self._current.pop(session_id, None)
            self._last_seen.pop(session_id, None)
        if idle:
            logger.info(f"Evicted {len(idle)} inactive sessions")
        return len(idle)

    def session_summary(self, session_id: str) -> dict:
        current = self.get_current_project(session_id)
        projects = self.list_projects(session_id)
        return {
            "session_id": session_id,
            "total_projects": len(projects),
            "active_project": current.to_dict() if current else None,
            "projects": [
                {
                    "id": p.id,
                    "title": p.title,
                    "concept": p.concept,
                    "phase": p.phase.value,
                    "artifacts_count": len(p.artifacts),
                }
                for p in projects
            ],
        }
