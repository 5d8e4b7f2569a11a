# semantic_memory/orchestrator/__init__.py
"""Semantic Orchestrator package."""

from semantic_memory.orchestrator.errors import (
    SemanticMemoryError,
    InvalidInputError,
    ModuleUnavailableError,
    AnalysisFailure,
    RuleConfigError,
    ConfigurationError,
)
from semantic_memory.orchestrator.orchestrator import SemanticOrchestrator, AnalysisResult
from semantic_memory.orchestrator.fusion import fuse

__all__ = [
    "SemanticOrchestrator",
    "AnalysisResult",
    "fuse",
    "SemanticMemoryError",
    "InvalidInputError",
    "ModuleUnavailableError",
    "AnalysisFailure",
    "RuleConfigError",
    "ConfigurationError",
]
