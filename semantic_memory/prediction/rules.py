# semantic_memory/prediction/rules.py
"""Prediction rule tables, loaded from JSON data files."""

import json
import logging
from pathlib import Path
from typing import Optional

from semantic_memory.orchestrator.errors import RuleConfigError
from semantic_memory.prediction.types import PredictionRule
from semantic_memory.projects.phases import ProjectPhase

logger = logging.getLogger(__name__)

# Default rules directory
RULES_DIR = Path(__file__).parent / "rules"

GENERAL_RULE_TYPE = "general"

# Project concept to rule type mapping
CONCEPT_RULE_TYPES = {
    "branding": "branding",
    "logo": "branding",
    "логотип": "branding",
    "apparel_design": "apparel",
    "print": "apparel",
    "принт": "apparel",
    "embroidery_design": "embroidery",
    "embroidery": "embroidery",
    "вышивка": "embroidery",
    "character_design": "character",
    "character": "character",
    "персонаж": "character",
}

REQUIRED_FIELDS = ("action", "description", "probability")


def map_concept_to_type(concept: Optional[str]) -> str:
    """Rule type for a project concept; unknown concepts map to general."""
    if not concept:
        return GENERAL_RULE_TYPE
    return CONCEPT_RULE_TYPES.get(concept.lower().strip(), GENERAL_RULE_TYPE)


def _validate_rule(rule_type: str, phase: str, data) -> PredictionRule:
    if not isinstance(data, dict):
        raise RuleConfigError(f"Rule in {rule_type}/{phase} must be an object", rule_type)

    missing = [name for name in REQUIRED_FIELDS if name not in data]
    if missing:
        raise RuleConfigError(
            f"Rule in {rule_type}/{phase} is missing fields: {', '.join(missing)}",
            rule_type,
        )

    try:
        probability = float(data["probability"])
    except (TypeError, ValueError):
        raise RuleConfigError(
            f"Rule {data['action']} has non-numeric probability: {data['probability']!r}",
            rule_type,
        )
    if not 0.0 <= probability <= 1.0:
        raise RuleConfigError(
            f"Rule {data['action']} probability must be in [0, 1], got {probability}",
            rule_type,
        )

    keywords = data.get("keywords", [])
    if not isinstance(keywords, list) or not all(isinstance(k, str) for k in keywords):
        raise RuleConfigError(f"Rule {data['action']} keywords must be a list of strings", rule_type)

    return PredictionRule.from_dict(data)


def parse_rule_table(data: dict, source: str = "<memory>") -> tuple[str, dict[ProjectPhase, list[PredictionRule]]]:
    """Validate one rule table and return (rule_type, rules by phase)."""
    rule_type = data.get("rule_type") if isinstance(data, dict) else None
    if not rule_type:
        raise RuleConfigError(f"Rule table {source} has no rule_type")

    phases = data.get("phases")
    if not isinstance(phases, dict):
        raise RuleConfigError(f"Rule table {source} has no phases mapping", rule_type)

    table = {}
    for phase_name, rules in phases.items():
        try:
            phase = ProjectPhase.from_string(phase_name)
        except ValueError:
            raise RuleConfigError(f"Unknown phase '{phase_name}' in {source}", rule_type)
        if not isinstance(rules, list):
            raise RuleConfigError(f"Rules for {rule_type}/{phase_name} must be a list", rule_type)
        table[phase] = [_validate_rule(rule_type, phase_name, r) for r in rules]

    return rule_type, table


class RuleBook:
    """Rule tables keyed by rule type and phase, loaded once per instance."""

    def __init__(self, rules_dir: Optional[Path] = None):
        self.rules_dir = rules_dir or RULES_DIR
        self._tables: Optional[dict[str, dict[ProjectPhase, list[PredictionRule]]]] = None

    @classmethod
    def from_tables(cls, tables: list[dict]) -> "RuleBook":
        """Build a rule book from in-memory tables instead of files."""
        book = cls()
        book._tables = {}
        for data in tables:
            rule_type, table = parse_rule_table(data)
            book._tables[rule_type] = table
        return book

    def load(self) -> dict[str, dict[ProjectPhase, list[PredictionRule]]]:
        """Load and validate every table in the rules directory."""
        if self._tables is not None:
            return self._tables

        if not self.rules_dir.exists():
            raise RuleConfigError(f"Rules directory not found: {self.rules_dir}")

        tables = {}
        for path in sorted(self.rules_dir.glob("*.json")):
            try:
                with open(path, encoding="utf-8") as f:
                    data = json.load(f)
            except json.JSONDecodeError as e:
                raise RuleConfigError(f"Invalid JSON in {path.name}: {e}")
            rule_type, table = parse_rule_table(data, path.name)
            if rule_type in tables:
                raise RuleConfigError(f"Duplicate rule type in {path.name}", rule_type)
            tables[rule_type] = table

        if GENERAL_RULE_TYPE not in tables:
            raise RuleConfigError("No general rule table found", GENERAL_RULE_TYPE)

        logger.debug(f"Loaded {len(tables)} rule tables from {self.rules_dir}")
        self._tables = tables
        return tables

    def rule_types(self) -> list[str]:
        return list(self.load())

    def rules_for(self, rule_type: str, phase: ProjectPhase) -> list[PredictionRule]:
        """Rules for a type and phase, falling back to general's rules for the phase."""
        tables = self.load()
        rules = tables.get(rule_type, {}).get(phase)
        if not rules:
            rules = tables[GENERAL_RULE_TYPE].get(phase, [])
        return list(rules)

    def all_rules(self) -> list[tuple[str, ProjectPhase, PredictionRule]]:
        """Flat (rule_type, phase, rule) listing for display."""
        return [
            (rule_type, phase, rule)
            for rule_type, table in self.load().items()
            for phase, rules in table.items()
            for rule in rules
        ]
