# semantic_memory/orchestrator/errors.py
"""Custom error types for semantic analysis."""


class SemanticMemoryError(Exception):
    """Base error for semantic memory operations."""
    pass


class InvalidInputError(SemanticMemoryError):
    """Request rejected before any component ran."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message)
        self.field = field


class ModuleUnavailableError(SemanticMemoryError):
    """A pluggable module could not be loaded."""

    def __init__(self, message: str, module_name: str = None):
        super().__init__(message)
        self.module_name = module_name


class AnalysisFailure(SemanticMemoryError):
    """A loaded component raised while handling a single request."""

    def __init__(self, message: str, component: str = None):
        super().__init__(message)
        self.component = component


class RuleConfigError(SemanticMemoryError):
    """Prediction rule table is missing or malformed."""

    def __init__(self, message: str, rule_type: str = None):
        super().__init__(message)
        self.rule_type = rule_type


class ConfigurationError(SemanticMemoryError):
    """Configuration value is invalid."""
    pass
