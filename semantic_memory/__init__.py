"""Semantic memory for a creative-asset assistant.

Classifies requests, tracks multi-turn projects and predicts next steps.
"""

__version__ = "0.1.0"

from semantic_memory.orchestrator import SemanticOrchestrator, AnalysisResult
from semantic_memory.orchestrator.errors import (
    SemanticMemoryError,
    InvalidInputError,
    AnalysisFailure,
    ModuleUnavailableError,
    RuleConfigError,
    ConfigurationError,
)

__all__ = [
    "__version__",
    "SemanticOrchestrator",
    "AnalysisResult",
    "SemanticMemoryError",
    "InvalidInputError",
    "AnalysisFailure",
    "ModuleUnavailableError",
    "RuleConfigError",
    "ConfigurationError",
]
