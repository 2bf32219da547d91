"""Closed label sets used by the classifier."""

from enum import Enum


class _Label(str, Enum):
    """String enum with lenient parsing."""

    @classmethod
    def from_string(cls, value: str | None):
        """Create a member from a string value, ignoring case.

        Returns None when the value is empty, unknown or not a string.
        """
        if not isinstance(value, str) or not value:
            return None
        wanted = value.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None

    def __str__(self) -> str:
        return self.value


class Category(_Label):
    """Business categories a journal entry can fall into."""

    GROWTH = "Growth"
    CHALLENGE = "Challenge"
    ACHIEVEMENT = "Achievement"
    PLANNING = "Planning"
    LEARNING = "Learning"
    RESEARCH = "Research"


class Energy(_Label):
    """Energy level expressed by an entry."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class MoodPolarity(_Label):
    """Coarse sentiment direction of a mood label."""

    POSITIVE = "Positive"
    NEGATIVE = "Negative"
    NEUTRAL = "Neutral"


class FeedbackType(_Label):
    """What a user correction changes."""

    CATEGORY_CORRECTION = "category_correction"
    MOOD_CORRECTION = "mood_correction"
    BOTH = "both"

    @property
    def corrects_category(self) -> bool:
        return self is not FeedbackType.MOOD_CORRECTION

    @property
    def corrects_mood(self) -> bool:
        return self is not FeedbackType.CATEGORY_CORRECTION


class ExampleSource(_Label):
    """Provenance of a training example."""

    HANDWRITTEN = "handwritten"
    SYNTHETIC = "synthetic"
    USER_CORRECTION = "user_correction"
