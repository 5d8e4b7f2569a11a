# semantic_memory/prediction/predictor.py
"""Rule-based next-step predictor."""

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from semantic_memory.prediction.behavior import behavioral_predictions
from semantic_memory.prediction.rules import RuleBook, map_concept_to_type
from semantic_memory.prediction.types import Prediction, PredictionRule
from semantic_memory.projects.artifacts import ArtifactType, utcnow
from semantic_memory.projects.models import Project
from semantic_memory.registry.base import Predictor

logger = logging.getLogger(__name__)

MAX_PROBABILITY = 0.95
MAX_CONFIDENCE = 0.95
KEYWORD_BOOST = 0.1

# Inactivity decay, checked longest first
STALE_AFTER = timedelta(hours=24)
STALE_FACTOR = 0.7
IDLE_AFTER = timedelta(hours=2)
IDLE_FACTOR = 0.9

FRESH_PROJECT_AGE = timedelta(hours=1)
FRESH_PROJECT_BONUS = 0.1
HAS_ARTIFACTS_BONUS = 0.05
HAS_RECENT_QUERIES_BONUS = 0.05

MAX_PROMPTS = 3
DEFAULT_PROMPT_TEMPLATES = ("Доработай {title}", "Улучши проект")

# Latest-artifact description markers for steps already taken
DONE_MARKERS = {
    "simplify_details": "упрощен",
    "reduce_colors": "цвета сокращены",
}

LONG_TERM_GOALS = {
    "branding": [
        "Создание полного фирменного стиля",
        "Разработка брендбука",
        "Применение на всех носителях",
    ],
    "apparel": [
        "Запуск производства принтов",
        "Создание коллекции дизайнов",
        "Маркетинг и продажи",
    ],
    "character": [
        "Развитие персонажа в серию",
        "Создание истории и контента",
        "Коммерциализация персонажа",
    ],
    "embroidery": [
        "Производство вышитых изделий",
        "Создание каталога дизайнов",
        "Масштабирование производства",
    ],
}

SATISFIED_WORDS = ("отлично", "хорошо", "подходит", "нравится", "супер")
DISSATISFIED_WORDS = ("не то", "плохо", "не нравится", "переделай", "по-другому")


def _context_list(context: Optional[dict], camel: str, snake: str) -> list[str]:
    if not context:
        return []
    value = context.get(camel, context.get(snake))
    return [str(v) for v in value] if value else []


class NextStepPredictor(Predictor):
    """
    Ranks likely next actions for a project.

    Rules come from the RuleBook for the project's concept type and phase.
    Probabilities are boosted by keywords in recent queries and decayed by
    inactivity; behavioral predictions follow the rule predictions.
    """

    def __init__(
        self,
        rule_book: Optional[RuleBook] = None,
        max_predictions: int = 3,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.rule_book = rule_book or RuleBook()
        self.max_predictions = max_predictions
        self._clock = clock

        # Fail at construction so a broken rule table degrades to the fallback
        self.rule_book.load()

    def predict(self, project: Project, context: Optional[dict] = None, now: Optional[datetime] = None) -> list[Prediction]:
        """
        Predict the next steps for a project.

        Args:
            project: Project to predict for
            context: Request context; reads recentQueries and userBehaviorHistory
            now: Reference time for decay and freshness

        Returns:
            Up to max_predictions predictions, rule-based first
        """
        now = now or self._clock()
        recent_queries = _context_list(context, "recentQueries", "recent_queries")

        rule_type = map_concept_to_type(project.concept)
        rules = self.rule_book.rules_for(rule_type, project.phase)

        predictions = [
            self.create_prediction(rule, project, recent_queries, now)
            for rule in rules
            if not self.is_already_done(rule.action, project)
        ]
        predictions.sort(key=lambda p: p.probability, reverse=True)

        history = _context_list(context, "userBehaviorHistory", "user_behavior_history") or recent_queries
        predictions.extend(behavioral_predictions(history, project.id))

        logger.debug(
            f"Predicted {len(predictions)} steps for project {project.id} "
            f"({rule_type}, {project.phase.value})"
        )
        return predictions[: self.max_predictions]

    def is_already_done(self, action: str, project: Project) -> bool:
        if action == "vectorize":
            return project.has_artifact_type(ArtifactType.VECTOR)
        if action == "convert_to_dst":
            return project.has_artifact_type(ArtifactType.EMBROIDERY)

        marker = DONE_MARKERS.get(action)
        if marker and project.latest_artifact is not None:
            return marker in project.latest_artifact.description.lower()
        return False

    def adjust_probability(self, rule: PredictionRule, project: Project, recent_queries: list[str], now: datetime) -> float:
        probability = rule.probability

        if recent_queries:
            text = " ".join(recent_queries).lower()
            hits = sum(1 for keyword in rule.keywords if keyword in text)
            probability += hits * KEYWORD_BOOST

        inactive = now - project.updated_at
        if inactive > STALE_AFTER:
            probability *= STALE_FACTOR
        elif inactive > IDLE_AFTER:
            probability *= IDLE_FACTOR

        return round(min(probability, MAX_PROBABILITY), 4)

    def calculate_confidence(self, rule: PredictionRule, project: Project, recent_queries: list[str], now: datetime) -> float:
        confidence = rule.probability

        if now - project.created_at < FRESH_PROJECT_AGE:
            confidence += FRESH_PROJECT_BONUS
        if project.artifacts:
            confidence += HAS_ARTIFACTS_BONUS
        if recent_queries:
            confidence += HAS_RECENT_QUERIES_BONUS

        return round(min(confidence, MAX_CONFIDENCE), 4)

    def suggest_prompts(self, rule: PredictionRule, project: Project) -> list[str]:
        title = project.title.lower()
        if rule.prompt_templates:
            templates = list(rule.prompt_templates)
        else:
            templates = [rule.description.lower(), *DEFAULT_PROMPT_TEMPLATES]
        return [t.replace("{title}", title) for t in templates][:MAX_PROMPTS]

    def create_prediction(self, rule: PredictionRule, project: Project, recent_queries: list[str], now: datetime) -> Prediction:
        return Prediction(
            action=rule.action,
            description=rule.description,
            probability=self.adjust_probability(rule, project, recent_queries, now),
            confidence=self.calculate_confidence(rule, project, recent_queries, now),
            benefits=rule.benefits,
            suggested_prompts=self.suggest_prompts(rule, project),
            keywords=list(rule.keywords),
            project_id=project.id,
        )

    def predict_long_term_goals(self, project: Project) -> list[dict]:
        """Long-horizon goals for the project's concept type."""
        goals = LONG_TERM_GOALS.get(map_concept_to_type(project.concept), [])
        return [
            {
                "goal": goal,
                "probability": round(0.6 - i * 0.1, 2),
                "timeframe": f"{(i + 1) * 2}-{(i + 1) * 4} недели",
            }
            for i, goal in enumerate(goals)
        ]

    def analyze_usage_trends(self, project: Project, context: Optional[dict] = None) -> dict:
        """Complexity trend, format shift and satisfaction signals."""
        trends = {
            "increasing_complexity": False,
            "focus_shift": None,
            "user_satisfaction": "unknown",
        }

        if len(project.artifacts) > 1:
            trends["increasing_complexity"] = complexity_trend(project.artifacts) > 0
            trends["focus_shift"] = focus_shift(project.artifacts)

        recent_queries = _context_list(context, "recentQueries", "recent_queries")
        if recent_queries:
            trends["user_satisfaction"] = satisfaction(recent_queries)

        return trends


def complexity_trend(artifacts) -> float:
    """Mean description length of the later half minus the earlier half."""
    if len(artifacts) < 2:
        return 0.0
    middle = len(artifacts) // 2
    first, second = artifacts[:middle], artifacts[middle:]
    avg_first = sum(len(a.description) for a in first) / len(first)
    avg_second = sum(len(a.description) for a in second) / len(second)
    return avg_second - avg_first


def focus_shift(artifacts) -> Optional[str]:
    types = [a.type for a in artifacts]
    if len(set(types)) == 1:
        return None
    recent, earlier = types[-2:], types[:-2]
    if all(t not in earlier for t in recent):
        return "shift_to_new_format"
    return None


def satisfaction(recent_queries: list[str]) -> str:
    text = " ".join(recent_queries).lower()
    satisfied = sum(1 for word in SATISFIED_WORDS if word in text)
    dissatisfied = sum(1 for word in DISSATISFIED_WORDS if word in text)
    if satisfied > dissatisfied:
        return "satisfied"
    if dissatisfied > satisfied:
        return "dissatisfied"
    return "neutral"
