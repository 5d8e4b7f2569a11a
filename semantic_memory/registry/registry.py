# semantic_memory/registry/registry.py
"""Module registry - loads analyzer modules and substitutes fallbacks."""

import importlib
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from semantic_memory.orchestrator.errors import ModuleUnavailableError
from semantic_memory.registry.base import Analyzer, Classifier, IntentRecognizer, Predictor
from semantic_memory.registry.fallbacks import FALLBACKS

logger = logging.getLogger(__name__)

ROLE_INTERFACES = {
    "classifier": Classifier,
    "intents": IntentRecognizer,
    "predictor": Predictor,
    "analyzer": Analyzer,
}


@dataclass(frozen=True)
class ModuleSpec:
    """Where to load a module from and which role it fills."""

    name: str
    role: str
    target: str  # "package.module:Attribute"
    options: dict = field(default_factory=dict, hash=False)


@dataclass
class ModuleHealth:
    """Load outcome of one module."""

    name: str
    role: str
    available: bool
    is_fallback: bool = False
    error: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "role": self.role,
            "available": self.available,
            "is_fallback": self.is_fallback,
            "error": self.error,
        }


DEFAULT_MODULES = (
    ModuleSpec("cluster_classifier", "classifier", "semantic_memory.analysis.classifier:ClusterClassifier"),
    ModuleSpec("intent_matcher", "intents", "semantic_memory.analysis.intents:IntentMatcher"),
    ModuleSpec("next_step_predictor", "predictor", "semantic_memory.prediction.predictor:NextStepPredictor"),
    ModuleSpec("context_enricher", "analyzer", "semantic_memory.analysis.enrichment:ContextEnricher"),
)


def load_target(spec: ModuleSpec, options: Optional[dict] = None) -> Any:
    """
    Import and instantiate a module spec.

    Raises:
        ModuleUnavailableError: On import failure, a bad target, a
            constructor error or an object that does not implement the role
    """
    interface = ROLE_INTERFACES.get(spec.role)
    if interface is None:
        raise ModuleUnavailableError(f"Unknown role: {spec.role}", spec.name)

    module_path, _, attr = spec.target.partition(":")
    if not module_path or not attr:
        raise ModuleUnavailableError(f"Invalid target '{spec.target}'", spec.name)

    try:
        module = importlib.import_module(module_path)
        obj = getattr(module, attr)
        kwargs = {**spec.options, **(options or {})}
        instance = obj(**kwargs) if callable(obj) else obj
    except Exception as e:
        raise ModuleUnavailableError(f"Failed to load {spec.target}: {e}", spec.name) from e

    if not isinstance(instance, interface):
        raise ModuleUnavailableError(
            f"{spec.target} does not implement {interface.__name__}", spec.name
        )
    return instance


class ModuleRegistry:
    """
    Loads every configured module once, at construction.

    A module that cannot be loaded is replaced by its role's fallback and
    recorded in health(); loading never raises.
    """

    def __init__(self, specs=DEFAULT_MODULES, options: Optional[dict[str, dict]] = None):
        self.specs = list(specs)
        self._options = options or {}
        self._modules: dict[str, Any] = {}
        self._health: dict[str, ModuleHealth] = {}

        for spec in self.specs:
            self._load(spec)

    def _load(self, spec: ModuleSpec) -> None:
        try:
            self._modules[spec.name] = load_target(spec, self._options.get(spec.name))
            self._health[spec.name] = ModuleHealth(spec.name, spec.role, available=True)
            logger.debug(f"Loaded module {spec.name} from {spec.target}")
        except ModuleUnavailableError as e:
            fallback = FALLBACKS.get(spec.role, FALLBACKS["analyzer"])
            self._modules[spec.name] = fallback()
            self._health[spec.name] = ModuleHealth(
                spec.name, spec.role, available=False, is_fallback=True, error=str(e)
            )
            logger.warning(f"Module {spec.name} unavailable, using {fallback.__name__}: {e}")

    def get(self, name: str) -> Any:
        """Get a loaded module (or its fallback) by name."""
        if name not in self._modules:
            raise KeyError(f"Unknown module: {name}")
        return self._modules[name]

    def by_role(self, role: str) -> list:
        """All modules filling a role, in declaration order."""
        return [self._modules[s.name] for s in self.specs if s.role == role]

    def first(self, role: str):
        """The first module for a role, or the role's fallback when none is declared."""
        modules = self.by_role(role)
        if modules:
            return modules[0]
        return FALLBACKS[role]()

    def named(self, role: str) -> list[tuple[str, Any]]:
        return [(s.name, self._modules[s.name]) for s in self.specs if s.role == role]

    def health(self) -> list[ModuleHealth]:
        return [self._health[s.name] for s in self.specs]

    def fallbacks(self) -> list[ModuleHealth]:
        return [h for h in self.health() if h.is_fallback]

    def availability(self) -> float:
        """Share of modules loaded for real, 1.0 when none are declared."""
        if not self.specs:
            return 1.0
        loaded = sum(1 for h in self._health.values() if h.available)
        return loaded / len(self.specs)
