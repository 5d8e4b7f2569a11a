# semantic_memory/orchestrator/orchestrator.py
"""Semantic Orchestrator - coordinates request analysis."""

import copy
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from pydantic import ValidationError

from semantic_memory.analysis.catalog import get_cluster
from semantic_memory.analysis.types import ClusterMatch, Intent
from semantic_memory.cache import ResultCache, make_cache_key, session_key_prefix
from semantic_memory.config import AnalyzerConfig
from semantic_memory.health.monitor import PerformanceMonitor
from semantic_memory.orchestrator.errors import AnalysisFailure, InvalidInputError
from semantic_memory.orchestrator.fusion import fuse
from semantic_memory.orchestrator.logging import AnalysisLogger
from semantic_memory.prediction.types import Prediction
from semantic_memory.projects.artifacts import Artifact, utcnow
from semantic_memory.projects.models import Project, ProjectContext
from semantic_memory.projects.repository import ProjectRepository
from semantic_memory.projects.store import ProjectStore
from semantic_memory.registry.registry import DEFAULT_MODULES, ModuleRegistry
from semantic_memory.schemas import AnalysisContext, AnalyzeRequest

logger = logging.getLogger(__name__)

NEXT_STEP_THRESHOLD = 0.8
SUGGESTION_THRESHOLD = 0.6
MAX_SUGGESTIONS = 3


@dataclass
class AnalysisResult:
    """Everything the orchestrator learned about one request."""

    query: str
    session_id: str
    cluster: Optional[ClusterMatch] = None
    intents: list[Intent] = field(default_factory=list)
    enrichments: dict = field(default_factory=dict)
    project: Optional[dict] = None
    project_context: Optional[dict] = None
    predictions: list[Prediction] = field(default_factory=list)
    confidence: int = 0
    recommendations: list[dict] = field(default_factory=list)
    fallback: bool = False
    failed_components: list[str] = field(default_factory=list)
    module_health: list[dict] = field(default_factory=list)
    processing_time_ms: float = 0.0
    cached: bool = False

    def to_dict(self) -> dict:
        return {
            "query": self.query,
            "session_id": self.session_id,
            "cluster": self.cluster.to_dict() if self.cluster else None,
            "intents": [i.to_dict() for i in self.intents],
            "enrichments": self.enrichments,
            "project": self.project,
            "project_context": self.project_context,
            "predictions": [p.to_dict() for p in self.predictions],
            "confidence": self.confidence,
            "recommendations": self.recommendations,
            "fallback": self.fallback,
            "failed_components": list(self.failed_components),
            "module_health": self.module_health,
            "processing_time_ms": self.processing_time_ms,
            "cached": self.cached,
        }


class SemanticOrchestrator:
    """
    Runs a request through classification, intent matching, enrichment,
    project routing, prediction and fusion.

    Component failures are caught here and nowhere else: the failing
    component's contribution is dropped, the result is marked as a
    fallback and the pipeline continues.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        modules=None,
        repository: Optional[ProjectRepository] = None,
        cache: Optional[ResultCache] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.config = config or AnalyzerConfig()
        self.logger = AnalysisLogger()
        self._clock = clock

        self.registry = ModuleRegistry(modules if modules is not None else DEFAULT_MODULES)
        self.cache = cache or ResultCache(
            ttl=self.config.cache_ttl_seconds,
            capacity=self.config.cache_capacity,
        )
        self.store = ProjectStore(
            repository=repository,
            idle_timeout=timedelta(hours=self.config.session_idle_hours),
            clock=clock,
        )
        self.monitor = PerformanceMonitor(
            slow_response_ms=self.config.slow_response_ms,
            response_window=self.config.response_window,
        )

        self.classifier = self.registry.first("classifier")
        self.intent_matcher = self.registry.first("intents")
        self.predictor = self.registry.first("predictor")
        self.analyzers = self.registry.named("analyzer")

        self._stats = {
            "queries_processed": 0,
            "cache_hits": 0,
            "cache_misses": 0,
            "projects_created": 0,
            "predictions_generated": 0,
        }

        for health in self.registry.fallbacks():
            self.logger.module_fallback(health.name, health.role, health.error or "")

    def _validate(self, query, session_id, context) -> tuple[AnalyzeRequest, AnalysisContext]:
        try:
            request = AnalyzeRequest(query=query, session_id=session_id, context=context or {})
            parsed = request.analysis_context
        except ValidationError as e:
            first = e.errors()[0]
            field_name = ".".join(str(part) for part in first.get("loc", ()))
            raise InvalidInputError(f"Invalid request: {first.get('msg')}", field_name) from e
        return request, parsed

    def _invoke(self, component: str, fn: Callable, *args) -> Any:
        """Call a component, wrapping any error in AnalysisFailure."""
        try:
            return fn(*args)
        except Exception as e:
            raise AnalysisFailure(f"{component} failed: {e}", component) from e

    def _guarded(self, session_id: str, failed: list[str], component: str, default: Any, fn: Callable, *args) -> Any:
        """Run a component; on failure record it and return the default."""
        try:
            return self._invoke(component, fn, *args)
        except AnalysisFailure as e:
            failed.append(component)
            cause = e.__cause__ or e
            self.logger.component_failed(session_id, component, type(cause).__name__, str(cause))
            return default

    def _resolve_concept(self, cluster: Optional[ClusterMatch], previous_category: Optional[str]) -> Optional[str]:
        if cluster is not None:
            return cluster.cluster_name
        if previous_category and get_cluster(previous_category) is not None:
            return previous_category
        return None

    def _component_context(self, request: AnalyzeRequest, parsed: AnalysisContext) -> dict:
        """Raw context plus normalized keys; recent queries include this request."""
        return {
            **request.context,
            "hasRecentImages": parsed.has_recent_images,
            "previousCategory": parsed.previous_category,
            "recentQueries": [*parsed.recent_queries, request.query],
            "userBehaviorHistory": list(parsed.user_behavior_history),
        }

    def analyze_request(self, query: str, session_id: str = "default", context: Optional[dict] = None) -> AnalysisResult:
        """
        Analyze one request.

        Args:
            query: Free-form user request
            session_id: Opaque session identifier
            context: Request context (hasRecentImages, previousCategory,
                recentQueries, userBehaviorHistory, ...)

        Returns:
            AnalysisResult; cached results are returned with cached=True

        Raises:
            InvalidInputError: Empty or non-string query, or malformed context
        """
        start = time.perf_counter()
        request, parsed = self._validate(query, session_id, context)
        session_id = request.session_id
        self._stats["queries_processed"] += 1

        key = make_cache_key(request.query, session_id, request.context)
        cached = self.cache.get(key)
        if cached is not None:
            self._stats["cache_hits"] += 1
            self.logger.cache_hit(session_id, key)
            self.monitor.record((time.perf_counter() - start) * 1000)
            result = copy.deepcopy(cached)
            result.cached = True
            return result

        self._stats["cache_misses"] += 1
        self.logger.analysis_started(session_id, request.query)

        failed: list[str] = []
        text = request.query
        ctx = self._component_context(request, parsed)

        cluster = self._guarded(session_id, failed, "classifier", None, self.classifier.classify, text)
        intents = self._guarded(session_id, failed, "intents", [], self.intent_matcher.match_intents, text) or []

        enrichments = {}
        for name, analyzer in self.analyzers:
            enrichment = self._guarded(session_id, failed, name, None, analyzer.analyze, text, ctx)
            if enrichment is None:
                continue
            suggest = getattr(analyzer, "generate_suggestions", None)
            if suggest is not None:
                enrichment["suggestions"] = self._guarded(
                    session_id, failed, name, [], suggest, enrichment, cluster,
                )
            enrichments[name] = enrichment

        concept = self._resolve_concept(cluster, ctx["previousCategory"])
        project_context: Optional[ProjectContext] = self._guarded(
            session_id, failed, "project_store", None,
            self.store.resolve, session_id, text, concept, intents, ctx,
        )
        project = project_context.project if project_context else None
        if project_context and project_context.is_new_project:
            self._stats["projects_created"] += 1
            self.logger.project_created(session_id, project.id, project.concept)

        predictions = []
        if project is not None:
            predictions = self._guarded(
                session_id, failed, "predictor", [],
                self.predictor.predict, project, ctx, self._clock(),
            ) or []
            predictions = predictions[: self.config.max_predictions]
            self._stats["predictions_generated"] += len(predictions)

        confidence = fuse(
            cluster,
            intents,
            project,
            project_context.confidence if project_context else 0.0,
        )

        duration_ms = (time.perf_counter() - start) * 1000
        result = AnalysisResult(
            query=text,
            session_id=session_id,
            cluster=cluster,
            intents=list(intents),
            enrichments=enrichments,
            project=project.to_dict() if project else None,
            project_context=project_context.to_dict() if project_context else None,
            predictions=list(predictions),
            confidence=confidence,
            recommendations=self.build_recommendations(enrichments, predictions, project),
            fallback=bool(failed),
            failed_components=failed,
            module_health=[h.to_dict() for h in self.registry.health()],
            processing_time_ms=round(duration_ms, 2),
        )

        # Degraded results are cached too; fallback marks them
        self.cache.set(key, copy.deepcopy(result))

        self.monitor.record(duration_ms, error=bool(failed))
        self.logger.analysis_complete(session_id, confidence, duration_ms, bool(failed))
        return result

    def build_recommendations(self, enrichments: dict, predictions: list[Prediction], project: Optional[Project]) -> list[dict]:
        """System recommendations, highest priority first."""
        recommendations = []

        critical = [
            req
            for enrichment in enrichments.values()
            for req in enrichment.get("implicit_requirements", [])
            if req.get("importance") == "critical"
        ]
        if critical:
            recommendations.append({
                "type": "critical_requirement",
                "message": f"Критически важно: {critical[0]['description']}",
                "action": critical[0].get("suggested_action"),
                "priority": "high",
            })

        if predictions and predictions[0].probability > NEXT_STEP_THRESHOLD:
            recommendations.append({
                "type": "next_step",
                "message": f"Рекомендуется: {predictions[0].description}",
                "action": predictions[0].action,
                "priority": "medium",
            })

        if project is not None and not project.artifacts:
            recommendations.append({
                "type": "project_start",
                "message": "Начинаем новый проект, рассмотрите долгосрочные цели",
                "priority": "low",
            })

        return recommendations[: self.config.max_recommendations]

    def add_artifact(self, session_id: str, artifact) -> Optional[Project]:
        """
        Record an artifact on the session's current project.

        Accepts an Artifact or its dict form. Drops the session's cached
        results, since they describe the project before the artifact.
        Returns None when the session has no project.
        """
        if isinstance(artifact, dict):
            artifact = Artifact.from_dict(artifact)

        project = self.store.add_artifact_to_current(session_id, artifact)
        if project is None:
            logger.warning(f"No current project for session {session_id}, artifact dropped")
            return None

        self.cache.invalidate_prefix(session_key_prefix(session_id))
        return project

    def get_proactive_suggestions(self, session_id: str, context: Optional[dict] = None) -> list[dict]:
        """Suggestions drawn from the top predictions for the current project."""
        project = self.store.get_current_project(session_id)
        if project is None:
            return []

        predictions = self._guarded(
            session_id, [], "predictor", [],
            self.predictor.predict, project, context or {}, self._clock(),
        ) or []
        suggestions = [
            {
                "type": "prediction",
                "action": p.action,
                "message": p.description,
                "confidence": p.probability,
                "prompts": p.suggested_prompts[:2],
            }
            for p in predictions[:2]
            if p.probability > SUGGESTION_THRESHOLD
        ]
        return suggestions[:MAX_SUGGESTIONS]

    def get_session_summary(self, session_id: str) -> dict:
        return self.store.session_summary(session_id)

    def get_project_outlook(self, session_id: str, context: Optional[dict] = None) -> Optional[dict]:
        """Long-term goals and usage trends for the current project."""
        project = self.store.get_current_project(session_id)
        if project is None:
            return None

        goals = getattr(self.predictor, "predict_long_term_goals", None)
        trends = getattr(self.predictor, "analyze_usage_trends", None)
        return {
            "project_id": project.id,
            "phase": project.phase.value,
            "progress": project.progress_summary(),
            "long_term_goals": goals(project) if goals else [],
            "usage_trends": trends(project, context or {}) if trends else {},
        }

    def evict_inactive_sessions(self) -> int:
        return self.store.evict_inactive(self._clock())

    def get_module_health(self) -> list[dict]:
        return [h.to_dict() for h in self.registry.health()]

    def get_statistics(self) -> dict:
        """Counters, timing and health for the whole orchestrator."""
        degraded = [h.name for h in self.registry.fallbacks()]
        health = self.monitor.get_health(self.registry.availability(), degraded)
        return {
            **self._stats,
            "average_response_time_ms": health["average_response_time_ms"],
            "system_health": health["system_health"],
            "error_count": self.monitor.errors,
            "status": health["status"],
            "alerts": health["alerts"],
            "cache": self.cache.stats(),
        }
