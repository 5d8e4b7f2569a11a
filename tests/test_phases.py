# tests/test_phases.py
"""Tests for project phase detection."""

import pytest

from conftest import image, vector


def _artifact(kind):
    from semantic_memory.projects.artifacts import Artifact, ArtifactType
    return Artifact(type=ArtifactType.from_string(kind))


def test_no_artifacts_is_initial():
    from semantic_memory.projects.phases import ProjectPhase, detect_phase

    assert detect_phase([]) == ProjectPhase.INITIAL


def test_single_image_is_after_image_creation():
    from semantic_memory.projects.phases import ProjectPhase, detect_phase

    assert detect_phase([image()]) == ProjectPhase.AFTER_IMAGE_CREATION


def test_any_vector_is_after_vectorization():
    from semantic_memory.projects.phases import ProjectPhase, detect_phase

    artifacts = [image(), _artifact("text"), vector(), _artifact("mockup")]

    assert detect_phase(artifacts) == ProjectPhase.AFTER_VECTORIZATION


def test_many_artifacts_without_vector_is_mature():
    from semantic_memory.projects.phases import ProjectPhase, detect_phase

    assert detect_phase([image(), image(), image()]) == ProjectPhase.MATURE


@pytest.mark.parametrize("kinds", [["text"], ["image", "image"], ["embroidery"]])
def test_otherwise_development(kinds):
    from semantic_memory.projects.phases import ProjectPhase, detect_phase

    assert detect_phase([_artifact(k) for k in kinds]) == ProjectPhase.DEVELOPMENT


def test_phase_is_pure():
    from semantic_memory.projects.phases import detect_phase

    artifacts = [image(), vector()]
    snapshot = list(artifacts)

    assert detect_phase(artifacts) == detect_phase(artifacts)
    assert artifacts == snapshot


def test_project_phase_follows_artifacts():
    from conftest import make_project
    from semantic_memory.projects.phases import ProjectPhase

    project = make_project()
    assert project.phase == ProjectPhase.INITIAL

    project.artifacts.append(image())
    assert project.phase == ProjectPhase.AFTER_IMAGE_CREATION


def test_stored_phase_is_ignored_on_load():
    from conftest import make_project
    from semantic_memory.projects.models import Project
    from semantic_memory.projects.phases import ProjectPhase

    data = make_project(artifacts=[image()]).to_dict()
    data["phase"] = "mature"

    assert Project.from_dict(data).phase == ProjectPhase.AFTER_IMAGE_CREATION


def test_unknown_artifact_type_is_other():
    from semantic_memory.projects.artifacts import ArtifactType

    assert ArtifactType.from_string("hologram") == ArtifactType.OTHER
