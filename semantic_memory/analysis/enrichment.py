"""Context enricher - the default plug-in analyzer.

Extracts business context, usage hints, logical action chains and the
implicit technical requirements a request carries.
"""

import logging
from typing import Optional

from semantic_memory.analysis.catalog import (
    BUSINESS_STEMS,
    BUSINESS_TYPES,
    LOGICAL_CHAINS,
    USAGE_CONTEXTS,
)
from semantic_memory.registry.base import Analyzer

logger = logging.getLogger(__name__)

CONTEXT_CLUE_SCORE = 40
REQUIREMENTS_SCORE = 30
CHAIN_WEIGHT = 0.2
MIN_CONFIDENCE = 35

DIRECT_CHAIN_CONFIDENCE = 0.9
CONTEXTUAL_CHAIN_CONFIDENCE = 0.85

IMPLICIT_REQUIREMENTS = {
    "логотип": [
        {
            "type": "scalability",
            "description": "Логотип должен масштабироваться без потери качества",
            "importance": "high",
            "suggested_action": "векторизация",
        },
        {
            "type": "simplicity",
            "description": "Логотип должен быть простым и запоминающимся",
            "importance": "medium",
            "suggested_action": "упрощение деталей",
        },
    ],
    "печать": [
        {
            "type": "print_quality",
            "description": "Изображение должно хорошо печататься",
            "importance": "high",
            "suggested_action": "высокое разрешение и контрастность",
        },
        {
            "type": "color_mode",
            "description": "Цвета должны быть адаптированы для печати",
            "importance": "medium",
            "suggested_action": "конвертация в CMYK",
        },
    ],
    "вышивк": [
        {
            "type": "thread_limitation",
            "description": "Ограничение количества цветов нитей",
            "importance": "critical",
            "suggested_action": "сокращение палитры до 8-12 цветов",
        },
        {
            "type": "detail_simplification",
            "description": "Мелкие детали не подходят для вышивки",
            "importance": "high",
            "suggested_action": "упрощение и укрупнение элементов",
        },
    ],
}

# "принт" shares the print requirements
REQUIREMENT_ALIASES = {"принт": "печать"}


class ContextEnricher(Analyzer):
    """Rule-based enrichment of a request with domain hints."""

    name = "context_clues"

    def analyze(self, text: str, context: Optional[dict] = None) -> dict:
        context = context or {}
        lowered = text.lower()

        clues = self.extract_context_clues(lowered)
        chains = self.build_logical_chains(lowered, context)
        requirements = self.identify_implicit_requirements(lowered)

        return {
            **clues,
            "logical_chains": chains,
            "implicit_requirements": requirements,
            "confidence": self.calculate_confidence(clues, chains, requirements),
        }

    def extract_context_clues(self, text: str) -> dict:
        """Business type, colour/style hints and usage media."""
        clues = {
            "business_context": None,
            "style_hints": [],
            "color_hints": [],
            "usage_hints": [],
        }

        for stem, business_type in BUSINESS_STEMS.items():
            if stem in text:
                data = BUSINESS_TYPES[business_type]
                clues["business_context"] = {"type": business_type, "data": data}
                clues["color_hints"].extend(data["typical_colors"])
                clues["style_hints"].extend(data["style_preferences"])

        for keyword, usage in USAGE_CONTEXTS.items():
            if keyword in text:
                clues["usage_hints"].append({"keyword": keyword, **usage})

        return clues

    def build_logical_chains(self, text: str, context: dict) -> list[dict]:
        """Known from -> to chains present in the text, plus the contextual
        vectorisation chain for sessions that already hold images."""
        chains = []

        for (source, target), steps in LOGICAL_CHAINS.items():
            if source in text and target in text:
                chains.append({
                    "from": source,
                    "to": target,
                    "steps": list(steps),
                    "type": "direct_chain",
                    "confidence": DIRECT_CHAIN_CONFIDENCE,
                })

        has_recent_images = context.get("hasRecentImages", context.get("has_recent_images", False))
        if has_recent_images and "вектор" in text:
            chains.append({
                "from": "existing_image",
                "to": "vector_format",
                "steps": ["анализ изображения", "извлечение контуров", "векторизация"],
                "type": "contextual_chain",
                "confidence": CONTEXTUAL_CHAIN_CONFIDENCE,
            })

        return chains

    def identify_implicit_requirements(self, text: str) -> list[dict]:
        """Requirements implied by the medium or asset type."""
        requirements = []
        seen = set()

        for keyword in list(IMPLICIT_REQUIREMENTS) + list(REQUIREMENT_ALIASES):
            if keyword not in text:
                continue
            source = REQUIREMENT_ALIASES.get(keyword, keyword)
            if source in seen:
                continue
            seen.add(source)
            requirements.extend(dict(req) for req in IMPLICIT_REQUIREMENTS[source])

        return requirements

    def calculate_confidence(self, clues: dict, chains: list[dict], requirements: list[dict]) -> int:
        """Mean of the active enrichment signals, 0-100."""
        total = 0.0
        factors = 0

        if clues["business_context"] or clues["usage_hints"]:
            total += CONTEXT_CLUE_SCORE
            factors += 1

        if chains:
            avg_chain = sum(chain["confidence"] * 100 for chain in chains) / len(chains)
            total += avg_chain * CHAIN_WEIGHT
            factors += 1

        if requirements:
            total += REQUIREMENTS_SCORE
            factors += 1

        if factors == 0:
            return 0

        return int(round(max(total / factors, MIN_CONFIDENCE)))

    def generate_suggestions(self, analysis: dict, cluster=None, limit: int = 5) -> list[dict]:
        """Suggestions from the cluster's typical next steps, high-importance
        requirements and business colours, highest confidence first."""
        suggestions = []

        if cluster is not None:
            for step in cluster.typical_next_steps:
                suggestions.append({
                    "type": "cluster_suggestion",
                    "action": step,
                    "reason": f"Типичный следующий шаг для {cluster.cluster_name}",
                    "confidence": cluster.confidence * 0.01,
                })

        for req in analysis.get("implicit_requirements", []):
            if req["importance"] in ("critical", "high"):
                suggestions.append({
                    "type": "requirement_suggestion",
                    "action": req["suggested_action"],
                    "reason": req["description"],
                    "confidence": 0.9 if req["importance"] == "critical" else 0.7,
                })

        business = analysis.get("business_context")
        if business:
            colors = ", ".join(business["data"]["typical_colors"][:3])
            suggestions.append({
                "type": "context_suggestion",
                "action": f"использовать цвета: {colors}",
                "reason": f"Подходящие цвета для {business['type']}",
                "confidence": 0.6,
            })

        suggestions.sort(key=lambda s: s["confidence"], reverse=True)
        return suggestions[:limit]
