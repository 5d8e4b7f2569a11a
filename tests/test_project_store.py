# tests/test_project_store.py
"""Tests for the project store."""

from datetime import timedelta
from unittest.mock import Mock

import pytest

from conftest import NOW, image


class StepClock:
    """datetime clock that only moves when told to."""

    def __init__(self, start=NOW):
        self.now = start

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return StepClock()


@pytest.fixture
def store(clock):
    from semantic_memory.projects.store import ProjectStore
    return ProjectStore(clock=clock)


def _intents(text):
    from semantic_memory.analysis.intents import IntentMatcher
    return IntentMatcher().match_intents(text)


def test_first_request_creates_project(store):
    ctx = store.resolve("s1", "создай логотип для кофейни", "branding", _intents("создай логотип"))

    assert ctx.is_new_project
    assert ctx.project.concept == "branding"
    assert ctx.project.session_id == "s1"
    assert store.get_current_project("s1") is ctx.project


def test_unknown_concept_creates_general_project(store):
    ctx = store.resolve("s1", "привет", None)

    assert ctx.project.concept == "general"


def test_compatible_request_reuses_project(store):
    first = store.resolve("s1", "логотип", "branding").project
    second = store.resolve("s1", "теперь сделай его синим", "logo", _intents("теперь сделай его синим"))

    assert not second.is_new_project
    assert second.project is first


def test_request_without_concept_reuses_project(store):
    first = store.resolve("s1", "логотип", "branding").project
    second = store.resolve("s1", "векторизуй", None, _intents("векторизуй"))

    assert second.project is first


def test_create_new_intent_forces_new_project(store):
    first = store.resolve("s1", "логотип", "branding").project
    second = store.resolve("s1", "создай другой логотип", "branding", _intents("создай другой логотип"))

    assert second.is_new_project
    assert second.project is not first
    assert len(store.list_projects("s1")) == 2


def test_incompatible_concept_creates_new_project(store):
    store.resolve("s1", "логотип", "branding")
    ctx = store.resolve("s1", "вышивка", "embroidery_design")

    assert ctx.is_new_project
    assert ctx.project.concept == "embroidery_design"


def test_get_or_create_project_reuses_compatible_project(store):
    first = store.get_or_create_project("s1", "логотип для кофейни", "branding")
    second = store.get_or_create_project("s1", "улучши логотип", "branding", _intents("улучши логотип"))

    assert second is first
    assert len(store.list_projects("s1")) == 1


def test_get_or_create_project_creates_for_create_new(store):
    first = store.get_or_create_project("s1", "логотип", "branding")
    second = store.get_or_create_project("s1", "создай новый логотип", "branding", _intents("создай новый логотип"))

    assert second is not first
    assert store.get_current_project("s1") is second


def test_get_or_create_project_creates_for_incompatible_concept(store):
    first = store.get_or_create_project("s1", "логотип", "branding")
    second = store.get_or_create_project("s1", "вышивка", "embroidery_design")

    assert second is not first
    assert second.concept == "embroidery_design"
    assert len(store.list_projects("s1")) == 2


def test_sessions_are_isolated(store):
    a = store.resolve("a", "логотип", "branding").project
    b = store.resolve("b", "логотип", "branding").project

    assert a is not b
    assert store.get_current_project("a") is a


def test_compatibility_score_components(store):
    project = store.resolve("s1", "логотип", "branding").project
    store.add_artifact(project, image())

    ctx = store.resolve(
        "s1",
        "улучши и векторизуй",
        "branding",
        _intents("улучши и векторизуй"),
        {"hasRecentImages": True},
    )

    assert ctx.project is project
    assert ctx.confidence == pytest.approx(0.9)
    assert len(ctx.reasons) == 3


def test_add_artifact_bumps_updated_at_and_persists(clock):
    from semantic_memory.projects.repository import InMemoryProjectRepository
    from semantic_memory.projects.store import ProjectStore

    repo = InMemoryProjectRepository()
    store = ProjectStore(repository=repo, clock=clock)
    project = store.resolve("s1", "логотип", "branding").project

    clock.now = NOW + timedelta(minutes=5)
    store.add_artifact(project, image())

    assert project.updated_at == NOW + timedelta(minutes=5)
    stored = repo.load_project("s1")
    assert len(stored.artifacts) == 1
    assert stored.updated_at == project.updated_at


def test_add_artifact_to_current_without_project(store):
    assert store.add_artifact_to_current("nobody", image()) is None


def test_repository_is_called_on_create():
    from semantic_memory.projects.store import ProjectStore

    repo = Mock()
    repo.load_project.return_value = None
    store = ProjectStore(repository=repo)

    project = store.resolve("s1", "логотип", "branding").project

    repo.load_project.assert_called_once_with("s1")
    repo.save_project.assert_called_once_with(project)


def test_evict_inactive_keeps_projects_in_repository(store, clock):
    project = store.resolve("s1", "логотип", "branding").project
    store.add_artifact(project, image())

    evicted = store.evict_inactive(NOW + timedelta(hours=25))

    assert evicted == 1
    assert store.list_projects("s1") == []

    reloaded = store.get_current_project("s1")
    assert reloaded.id == project.id
    assert len(reloaded.artifacts) == 1


def test_recent_sessions_are_not_evicted(store):
    store.resolve("s1", "логотип", "branding")

    assert store.evict_inactive(NOW + timedelta(hours=1)) == 0
    assert len(store.list_projects("s1")) == 1


def test_session_summary(store):
    store.resolve("s1", "логотип", "branding")
    store.resolve("s1", "создай новый принт", "apparel_design", _intents("создай новый принт"))

    summary = store.session_summary("s1")

    assert summary["total_projects"] == 2
    assert summary["active_project"]["concept"] == "apparel_design"
    assert [p["phase"] for p in summary["projects"]] == ["initial", "initial"]


def test_make_title_truncates_long_requests():
    from semantic_memory.projects.store import make_title

    assert make_title("логотип для кофейни") == "Логотип для кофейни"
    assert make_title("один два три четыре пять шесть семь") == "Один два три четыре пять шесть..."
