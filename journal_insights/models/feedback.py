"""Feedback data models for learning from user corrections."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from ..exceptions import FeedbackValidationError
from .classification import Category, FeedbackType


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


_TEXT_FIELDS = (
    "original_mood", "corrected_mood", "text_content", "timestamp", "timestamp_iso",
)


@dataclass(frozen=True)
class UserFeedback:
    """Represents a single user correction to an analysis result."""

    entry_id: str
    original_category: Category
    corrected_category: Category
    original_mood: str
    corrected_mood: str
    text_content: str
    user_id: str
    feedback_type: FeedbackType
    timestamp: str = field(default_factory=_now_iso)

    def to_dict(self) -> dict[str, str]:
        """Convert feedback to a dictionary for serialization."""
        return {
            "entry_id": self.entry_id,
            "original_category": str(self.original_category),
            "corrected_category": str(self.corrected_category),
            "original_mood": self.original_mood,
            "corrected_mood": self.corrected_mood,
            "text_content": self.text_content,
            "user_id": self.user_id,
            "timestamp": self.timestamp,
            "feedback_type": str(self.feedback_type),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserFeedback":
        """Create feedback from a dictionary and validate it.

        Identifiers are converted to strings; free-text fields must already
        be strings.

        Raises:
            FeedbackValidationError: If the record is malformed

        """
        if not isinstance(data, Mapping):
            raise FeedbackValidationError(
                f"Feedback record must be a mapping, got {type(data).__name__}"
            )
        for name in _TEXT_FIELDS:
            value = data.get(name)
            if value is not None and not isinstance(value, str):
                raise FeedbackValidationError(
                    f"Invalid {name}: expected a string, got {type(value).__name__}"
                )

        original = data.get("original_category")
        corrected = data.get("corrected_category")
        feedback_type = data.get("feedback_type")
        feedback = cls(
            entry_id=str(data.get("entry_id") or ""),
            original_category=Category.from_string(original) or original,
            corrected_category=Category.from_string(corrected) or corrected,
            original_mood=data.get("original_mood") or "",
            corrected_mood=data.get("corrected_mood") or "",
            text_content=data.get("text_content") or "",
            user_id=str(data.get("user_id") or ""),
            feedback_type=FeedbackType.from_string(feedback_type) or feedback_type,
            # Older records used "timestamp_iso"
            timestamp=data.get("timestamp") or data.get("timestamp_iso") or _now_iso(),
        )
        validate_feedback(feedback)
        return feedback


def validate_feedback(feedback: UserFeedback) -> None:
    """Check that a user correction can be learned from.

    Raises:
        FeedbackValidationError: On a missing id or user, unknown category or
            feedback type, non-string text fields, empty text or unparseable
            timestamp

    """
    if not isinstance(feedback.entry_id, str) or not feedback.entry_id:
        raise FeedbackValidationError("Missing entry_id in user feedback")
    if not isinstance(feedback.user_id, str) or not feedback.user_id:
        raise FeedbackValidationError("Missing user_id in feedback")
    if not isinstance(feedback.original_category, Category):
        raise FeedbackValidationError(
            f"Invalid original_category: {feedback.original_category!r}"
        )
    if not isinstance(feedback.corrected_category, Category):
        raise FeedbackValidationError(
            f"Invalid corrected_category: {feedback.corrected_category!r}"
        )
    if not isinstance(feedback.feedback_type, FeedbackType):
        raise FeedbackValidationError(
            f"Invalid feedback_type: {feedback.feedback_type!r}"
        )
    for name in ("original_mood", "corrected_mood"):
        if not isinstance(getattr(feedback, name), str):
            raise FeedbackValidationError(f"Invalid {name}: {getattr(feedback, name)!r}")
    if not isinstance(feedback.text_content, str) or not feedback.text_content.strip():
        raise FeedbackValidationError("Empty text_content in user feedback")
    if not isinstance(feedback.timestamp, str):
        raise FeedbackValidationError(f"Invalid timestamp: {feedback.timestamp!r}")
    try:
        datetime.fromisoformat(feedback.timestamp.replace("Z", "+00:00"))
    except ValueError as e:
        raise FeedbackValidationError(
            f"Invalid timestamp: {feedback.timestamp!r}"
        ) from e
