# tests/test_config.py
"""Tests for analyzer configuration."""

import pytest


def test_config_loads_defaults():
    from semantic_memory.config import AnalyzerConfig

    config = AnalyzerConfig()

    assert config.cache_ttl_seconds == 300
    assert config.cache_capacity == 100
    assert config.max_predictions == 3
    assert config.max_recommendations == 3
    assert config.session_idle_hours == 24
    assert config.slow_response_ms == 5000
    assert config.response_window == 100


def test_config_from_env(monkeypatch):
    from semantic_memory.config import AnalyzerConfig

    monkeypatch.setenv("SEMANTIC_CACHE_TTL_SECONDS", "60")
    monkeypatch.setenv("SEMANTIC_MAX_PREDICTIONS", "5")

    config = AnalyzerConfig.from_env()

    assert config.cache_ttl_seconds == 60
    assert config.max_predictions == 5
    assert config.cache_capacity == 100


def test_config_from_env_rejects_non_numeric(monkeypatch):
    from semantic_memory.config import AnalyzerConfig
    from semantic_memory.orchestrator.errors import ConfigurationError

    monkeypatch.setenv("SEMANTIC_CACHE_CAPACITY", "lots")

    with pytest.raises(ConfigurationError):
        AnalyzerConfig.from_env()


@pytest.mark.parametrize("field,value", [
    ("cache_ttl_seconds", 0),
    ("cache_capacity", 0),
    ("max_predictions", 0),
    ("max_recommendations", -1),
    ("session_idle_hours", 0),
    ("slow_response_ms", 0),
    ("response_window", 1),
])
def test_config_validation(field, value):
    from semantic_memory.config import AnalyzerConfig
    from semantic_memory.orchestrator.errors import ConfigurationError

    with pytest.raises(ConfigurationError, match=field):
        AnalyzerConfig(**{field: value})


def test_config_drives_orchestrator():
    from semantic_memory.config import AnalyzerConfig
    from semantic_memory.orchestrator import SemanticOrchestrator

    orchestrator = SemanticOrchestrator(AnalyzerConfig(cache_ttl_seconds=10, cache_capacity=5))

    assert orchestrator.cache.ttl == 10
    assert orchestrator.cache.capacity == 5
