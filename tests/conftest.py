"""Shared test helpers."""

from datetime import datetime, timedelta, timezone

# Fixed reference time so predictions and phases are reproducible
NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    """Manually advanced clock; callable like time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def make_project(concept="branding", artifacts=(), title="Логотип кофейни", age=timedelta(0), idle=timedelta(0)):
    """Project created `age` ago and last updated `idle` ago, relative to NOW."""
    from semantic_memory.projects.models import Project

    return Project(
        session_id="s1",
        title=title,
        concept=concept,
        artifacts=list(artifacts),
        created_at=NOW - age,
        updated_at=NOW - idle,
    )


def image(description="Логотип кофейни"):
    from semantic_memory.projects.artifacts import Artifact, ArtifactType

    return Artifact(type=ArtifactType.IMAGE, description=description, created_at=NOW)


def vector(description="SVG версия"):
    from semantic_memory.projects.artifacts import Artifact, ArtifactType

    return Artifact(type=ArtifactType.VECTOR, description=description, created_at=NOW)
