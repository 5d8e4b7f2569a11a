# semantic_memory/config.py
"""Configuration for the semantic analysis orchestrator."""

import os
from dataclasses import dataclass

from semantic_memory.orchestrator.errors import ConfigurationError


@dataclass
class AnalyzerConfig:
    """Configuration for the orchestrator and its collaborators."""

    # Result cache
    cache_ttl_seconds: int = 300  # 5 minutes
    cache_capacity: int = 100

    # Output limits
    max_predictions: int = 3
    max_recommendations: int = 3

    # Sessions idle longer than this leave the working set
    session_idle_hours: int = 24

    # Health scoring
    slow_response_ms: int = 5000  # speed factor reaches 0 here
    response_window: int = 100

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        if self.cache_ttl_seconds < 1:
            raise ConfigurationError("cache_ttl_seconds must be at least 1")

        if self.cache_capacity < 1:
            raise ConfigurationError("cache_capacity must be at least 1")

        if self.max_predictions < 1:
            raise ConfigurationError("max_predictions must be at least 1")

        if self.max_recommendations < 0:
            raise ConfigurationError("max_recommendations must be non-negative")

        if self.session_idle_hours < 1:
            raise ConfigurationError("session_idle_hours must be at least 1")

        if self.slow_response_ms < 1:
            raise ConfigurationError("slow_response_ms must be at least 1")

        if self.response_window < 2:
            raise ConfigurationError("response_window must be at least 2")

    @classmethod
    def from_env(cls) -> "AnalyzerConfig":
        """Create configuration from environment variables."""
        try:
            return cls(
                cache_ttl_seconds=int(os.environ.get("SEMANTIC_CACHE_TTL_SECONDS", 300)),
                cache_capacity=int(os.environ.get("SEMANTIC_CACHE_CAPACITY", 100)),
                max_predictions=int(os.environ.get("SEMANTIC_MAX_PREDICTIONS", 3)),
                max_recommendations=int(os.environ.get("SEMANTIC_MAX_RECOMMENDATIONS", 3)),
                session_idle_hours=int(os.environ.get("SEMANTIC_SESSION_IDLE_HOURS", 24)),
                slow_response_ms=int(os.environ.get("SEMANTIC_SLOW_RESPONSE_MS", 5000)),
                response_window=int(os.environ.get("SEMANTIC_RESPONSE_WINDOW", 100)),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid numeric setting in environment: {e}") from e
