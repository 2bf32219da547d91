"""Business pattern rule definition."""

import re
from dataclasses import dataclass
from re import Pattern

from .classification import Category, Energy, MoodPolarity


def term_group(*terms: str) -> Pattern:
    """Compile terms into one word-boundary alternation.

    Terms are regular expression fragments, so "launch(?:ed)?" is allowed.
    """
    return re.compile(r"\b(?:" + "|".join(terms) + r")\b")


@dataclass(frozen=True)
class Rule:
    """A high-precision predicate mapping text to a category."""

    id: str
    priority: int
    category: Category
    required: tuple[Pattern, ...]
    excluded: tuple[Pattern, ...] = ()
    energy: Energy | None = None
    mood_polarity: MoodPolarity | None = None
    confidence_boost: int = 10
    description: str = ""

    def matches(self, normalized_text: str) -> bool:
        """Return True when every required group matches and no exclusion does."""
        if not all(p.search(normalized_text) for p in self.required):
            return False
        return not any(p.search(normalized_text) for p in self.excluded)
