"""Persistence collaborator for projects."""

import copy
from abc import ABC, abstractmethod
from typing import Optional

from semantic_memory.projects.models import Project


class ProjectRepository(ABC):
    """Storage boundary for projects. The engine behind it is external."""

    @abstractmethod
    def load_project(self, session_id: str) -> Optional[Project]:
        """Return the session's most recently saved project, or None."""
        pass

    @abstractmethod
    def save_project(self, project: Project) -> None:
        """Persist the project's current state."""
        pass


class InMemoryProjectRepository(ProjectRepository):
    """Process-local repository; keeps copies so callers cannot alias stored state."""

    def __init__(self):
        self._projects: dict[str, Project] = {}
        self._latest_by_session: dict[str, str] = {}

    def load_project(self, session_id: str) -> Optional[Project]:
        project_id = self._latest_by_session.get(session_id)
        if project_id is None:
            return None
        return copy.deepcopy(self._projects[project_id])

    def save_project(self, project: Project) -> None:
        self._projects[project.id] = copy.deepcopy(project)
        self._latest_by_session[project.session_id] = project.id
