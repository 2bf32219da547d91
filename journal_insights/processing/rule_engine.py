"""Deterministic first-match evaluation of business rules."""

import logging
from collections.abc import Iterable

from ..models.rule import Rule
from .business_rules import BUSINESS_RULES

logger = logging.getLogger(__name__)


def normalize_text(text: str) -> str:
    """Lowercase and collapse whitespace."""
    return " ".join(text.lower().split())


class RuleEngine:
    """Evaluates rules by descending priority and reports the first match."""

    def __init__(self, rules: Iterable[Rule] | None = None) -> None:
        """Order the rules by priority.

        Args:
            rules: Rules to evaluate (defaults to BUSINESS_RULES)

        Raises:
            ValueError: If two rules share an id

        """
        rules = list(BUSINESS_RULES if rules is None else rules)
        seen: set[str] = set()
        for rule in rules:
            if rule.id in seen:
                raise ValueError(f"Duplicate rule id: {rule.id}")
            seen.add(rule.id)
        # sorted() is stable, so equal priorities keep declaration order
        self._rules = sorted(rules, key=lambda r: r.priority, reverse=True)

    @property
    def rules(self) -> list[Rule]:
        return list(self._rules)

    def first_match(self, text: str) -> Rule | None:
        """Return the highest-priority rule whose predicate holds, if any."""
        normalized = normalize_text(text)
        for rule in self._rules:
            if rule.matches(normalized):
                logger.debug(f"Rule {rule.id} matched: {normalized[:60]!r}")
                return rule
        return None
