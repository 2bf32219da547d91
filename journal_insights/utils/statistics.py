"""Utility functions for summarizing user corrections."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models.feedback import UserFeedback


@dataclass
class FeedbackStatistics:
    """Container for feedback statistics."""

    total: int
    category_corrections: int
    mood_corrections: int
    users: int
    most_corrected_category: str

    def to_display_string(self) -> str:
        """Format statistics for a one-line summary."""
        return (
            f"Total: {self.total} | Category: {self.category_corrections} | "
            f"Mood: {self.mood_corrections} | Users: {self.users} | "
            f"Most corrected: {self.most_corrected_category}"
        )


@dataclass
class CorrectionTrend:
    """How often each original label was changed into each corrected label."""

    category_changes: dict[str, int] = field(default_factory=dict)
    mood_changes: dict[str, int] = field(default_factory=dict)

    def most_common_category_change(self) -> str | None:
        if not self.category_changes:
            return None
        return max(self.category_changes.items(), key=lambda x: x[1])[0]

    def most_common_mood_change(self) -> str | None:
        if not self.mood_changes:
            return None
        return max(self.mood_changes.items(), key=lambda x: x[1])[0]


def _changes_category(feedback: UserFeedback) -> bool:
    return (
        feedback.feedback_type.corrects_category
        and feedback.original_category != feedback.corrected_category
    )


def _changes_mood(feedback: UserFeedback) -> bool:
    corrected = feedback.corrected_mood.strip()
    return (
        feedback.feedback_type.corrects_mood
        and bool(corrected)
        and corrected.lower() != feedback.original_mood.strip().lower()
    )


def calculate_feedback_statistics(feedback: Iterable[UserFeedback]) -> FeedbackStatistics:
    """Calculate statistics for a collection of user corrections.

    Args:
        feedback: Corrections to analyze

    Returns:
        FeedbackStatistics object containing calculated statistics

    """
    entries = list(feedback)
    if not entries:
        return FeedbackStatistics(
            total=0,
            category_corrections=0,
            mood_corrections=0,
            users=0,
            most_corrected_category="N/A",
        )

    category_fixes = [f for f in entries if _changes_category(f)]
    mood_corrections = sum(1 for f in entries if _changes_mood(f))

    originals = Counter(str(f.original_category) for f in category_fixes)
    most_corrected = originals.most_common(1)[0][0] if originals else "N/A"

    return FeedbackStatistics(
        total=len(entries),
        category_corrections=len(category_fixes),
        mood_corrections=mood_corrections,
        users=len({f.user_id for f in entries}),
        most_corrected_category=most_corrected,
    )


def calculate_correction_trends(feedback: Iterable[UserFeedback]) -> CorrectionTrend:
    """Count from -> to changes for categories and moods."""
    category_changes: Counter[str] = Counter()
    mood_changes: Counter[str] = Counter()

    for f in feedback:
        if _changes_category(f):
            category_changes[f"{f.original_category} → {f.corrected_category}"] += 1
        if _changes_mood(f):
            original = f.original_mood.strip() or "unknown"
            mood_changes[f"{original} → {f.corrected_mood.strip()}"] += 1

    return CorrectionTrend(
        category_changes=dict(category_changes),
        mood_changes=dict(mood_changes),
    )
