# semantic_memory/orchestrator/logging.py
"""Structured logging for the analysis orchestrator."""

import json
import logging
from datetime import datetime, timezone


class AnalysisLogger:
    """Structured JSON logger for analysis events."""

    def __init__(self, name: str = "semantic_memory.events"):
        self.logger = logging.getLogger(name)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter("%(message)s"))
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.INFO)

    def _log(self, level: int, event: str, **kwargs):
        """Log a structured event."""
        data = {
            "event": event,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **kwargs
        }
        self.logger.log(level, json.dumps(data, ensure_ascii=False))

    def analysis_started(self, session_id: str, query: str):
        self._log(
            logging.INFO,
            "analysis_started",
            session_id=session_id,
            query=query[:100]
        )

    def cache_hit(self, session_id: str, cache_key: str):
        self._log(
            logging.INFO,
            "cache_hit",
            session_id=session_id,
            cache_key=cache_key[:40]
        )

    def analysis_complete(self, session_id: str, confidence: int, duration_ms: float, fallback: bool):
        """Log analysis completion."""
        self._log(
            logging.INFO,
            "analysis_complete",
            session_id=session_id,
            confidence=confidence,
            duration_ms=round(duration_ms, 2),
            fallback=fallback
        )

    def component_failed(self, session_id: str, component: str, error_type: str, message: str):
        """Log a failing component; the analysis continues without it."""
        self._log(
            logging.ERROR,
            "component_failed",
            session_id=session_id,
            component=component,
            error_type=error_type,
            message=message
        )

    def module_fallback(self, module: str, role: str, error: str):
        self._log(
            logging.WARNING,
            "module_fallback",
            module=module,
            role=role,
            error=error
        )

    def project_created(self, session_id: str, project_id: str, concept: str):
        self._log(
            logging.INFO,
            "project_created",
            session_id=session_id,
            project_id=project_id,
            concept=concept
        )
