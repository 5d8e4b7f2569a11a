# tests/test_registry.py
"""Tests for the module registry and fallbacks."""

import json
import logging

import pytest


def test_default_modules_load():
    from semantic_memory.registry import ModuleRegistry

    registry = ModuleRegistry()

    assert all(h.available for h in registry.health())
    assert registry.availability() == 1.0
    assert registry.fallbacks() == []


def test_missing_module_uses_fallback(caplog):
    from semantic_memory.registry import FallbackClassifier, ModuleRegistry, ModuleSpec

    specs = [ModuleSpec("cluster_classifier", "classifier", "semantic_memory.nowhere:Classifier")]

    with caplog.at_level(logging.WARNING):
        registry = ModuleRegistry(specs)

    assert isinstance(registry.get("cluster_classifier"), FallbackClassifier)
    health = registry.health()[0]
    assert health.available is False
    assert health.is_fallback is True
    assert "semantic_memory.nowhere" in health.error
    assert "cluster_classifier" in caplog.text


def test_missing_attribute_uses_fallback():
    from semantic_memory.registry import FallbackIntentMatcher, ModuleRegistry, ModuleSpec

    registry = ModuleRegistry([ModuleSpec("intents", "intents", "semantic_memory.analysis.intents:Nope")])

    assert isinstance(registry.get("intents"), FallbackIntentMatcher)


def test_wrong_interface_uses_fallback():
    from semantic_memory.registry import FallbackPredictor, ModuleRegistry, ModuleSpec

    # A classifier registered in the predictor role
    spec = ModuleSpec("predictor", "predictor", "semantic_memory.analysis.classifier:ClusterClassifier")
    registry = ModuleRegistry([spec])

    assert isinstance(registry.get("predictor"), FallbackPredictor)
    assert "does not implement Predictor" in registry.health()[0].error


def test_invalid_target_uses_fallback():
    from semantic_memory.registry import FallbackAnalyzer, ModuleRegistry, ModuleSpec

    registry = ModuleRegistry([ModuleSpec("extra", "analyzer", "no_colon_here")])

    assert isinstance(registry.get("extra"), FallbackAnalyzer)


def test_broken_rules_degrade_predictor(tmp_path):
    from semantic_memory.prediction.rules import RuleBook
    from semantic_memory.registry import FallbackPredictor, ModuleRegistry, ModuleSpec

    (tmp_path / "general.json").write_text(json.dumps({"rule_type": "general"}), encoding="utf-8")
    spec = ModuleSpec(
        "next_step_predictor",
        "predictor",
        "semantic_memory.prediction.predictor:NextStepPredictor",
        options={"rule_book": RuleBook(tmp_path)},
    )

    registry = ModuleRegistry([spec])

    assert isinstance(registry.get("next_step_predictor"), FallbackPredictor)
    assert "phases" in registry.health()[0].error


def test_options_are_passed_to_constructor():
    from semantic_memory.registry import ModuleRegistry, ModuleSpec

    spec = ModuleSpec("p", "predictor", "semantic_memory.prediction.predictor:NextStepPredictor")
    registry = ModuleRegistry([spec], options={"p": {"max_predictions": 7}})

    assert registry.get("p").max_predictions == 7


def test_availability_counts_loaded_share():
    from semantic_memory.registry import DEFAULT_MODULES, ModuleRegistry, ModuleSpec

    specs = list(DEFAULT_MODULES) + [ModuleSpec("extra", "analyzer", "semantic_memory.nowhere:X")]
    registry = ModuleRegistry(specs)

    assert registry.availability() == pytest.approx(4 / 5)
    assert [h.name for h in registry.fallbacks()] == ["extra"]


def test_first_without_declared_role_returns_fallback():
    from semantic_memory.registry import FallbackClassifier, ModuleRegistry

    registry = ModuleRegistry([])

    assert isinstance(registry.first("classifier"), FallbackClassifier)
    assert registry.availability() == 1.0


def test_get_unknown_module_raises():
    from semantic_memory.registry import ModuleRegistry

    with pytest.raises(KeyError):
        ModuleRegistry().get("nope")


def test_fallbacks_are_conservative():
    from semantic_memory.registry import (
        FallbackAnalyzer,
        FallbackClassifier,
        FallbackIntentMatcher,
        FallbackPredictor,
    )

    assert FallbackClassifier().classify("логотип") is None
    assert FallbackIntentMatcher().match_intents("создай") == []
    assert FallbackPredictor().predict(object()) == []
    assert FallbackAnalyzer().analyze("x") == {"confidence": 0.3, "fallback": True}


def test_module_health_to_dict():
    from semantic_memory.registry import ModuleHealth

    health = ModuleHealth("m", "analyzer", available=False, is_fallback=True, error="boom")

    assert health.to_dict() == {
        "name": "m",
        "role": "analyzer",
        "available": False,
        "is_fallback": True,
        "error": "boom",
    }
