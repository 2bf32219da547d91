"""Tests for label enums, user feedback and analysis result models."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from journal_insights.exceptions import FeedbackValidationError
from journal_insights.models.analysis import AnalysisResult
from journal_insights.models.classification import (
    Category,
    Energy,
    FeedbackType,
    MoodPolarity,
)
from journal_insights.models.feedback import UserFeedback, validate_feedback


@pytest.fixture
def feedback_record():
    """Create a valid stored feedback record."""
    return {
        "entry_id": "entry-42",
        "original_category": "Challenge",
        "corrected_category": "Planning",
        "original_mood": "Worried",
        "corrected_mood": "",
        "text_content": "Cash flow is tight this month",
        "user_id": "user-1",
        "timestamp": "2024-03-01T09:30:00Z",
        "feedback_type": "category_correction",
    }


class TestLabels:
    """Test suite for label enums."""

    def test_from_string_ignores_case(self):
        """Test case-insensitive parsing."""
        assert Category.from_string("growth") == Category.GROWTH
        assert Energy.from_string(" LOW ") == Energy.LOW
        assert MoodPolarity.from_string("negative") == MoodPolarity.NEGATIVE

    def test_from_string_unknown(self):
        """Test that unknown or empty values return None."""
        assert Category.from_string("Marketing") is None
        assert Category.from_string("") is None
        assert Category.from_string(None) is None

    def test_from_string_non_string(self):
        """Test that non-string values return None instead of failing."""
        assert Category.from_string(3) is None
        assert FeedbackType.from_string(["both"]) is None

    def test_str_is_value(self):
        """Test that labels print as their value."""
        assert str(Category.RESEARCH) == "Research"
        assert f"{Energy.HIGH}" == "high"

    def test_feedback_type_scope(self):
        """Test which fields each correction type changes."""
        assert FeedbackType.CATEGORY_CORRECTION.corrects_category
        assert not FeedbackType.CATEGORY_CORRECTION.corrects_mood
        assert FeedbackType.MOOD_CORRECTION.corrects_mood
        assert not FeedbackType.MOOD_CORRECTION.corrects_category
        assert FeedbackType.BOTH.corrects_category and FeedbackType.BOTH.corrects_mood


class TestUserFeedback:
    """Test suite for UserFeedback."""

    def test_from_dict(self, feedback_record):
        """Test parsing a stored record."""
        feedback = UserFeedback.from_dict(feedback_record)
        assert feedback.corrected_category == Category.PLANNING
        assert feedback.feedback_type == FeedbackType.CATEGORY_CORRECTION

    def test_dict_round_trip(self, feedback_record):
        """Test that to_dict produces a record from_dict accepts."""
        feedback = UserFeedback.from_dict(feedback_record)
        assert UserFeedback.from_dict(feedback.to_dict()) == feedback

    def test_legacy_timestamp_field(self, feedback_record):
        """Test that the older timestamp_iso field is accepted."""
        feedback_record["timestamp_iso"] = feedback_record.pop("timestamp")
        assert UserFeedback.from_dict(feedback_record).timestamp == "2024-03-01T09:30:00Z"

    def test_non_mapping_record(self):
        """Test that a record that is not a mapping is rejected."""
        with pytest.raises(FeedbackValidationError):
            UserFeedback.from_dict(["entry-42", "Challenge"])

    def test_default_timestamp(self, feedback_record):
        """Test that a missing timestamp defaults to now."""
        del feedback_record["timestamp"]
        feedback = UserFeedback.from_dict(feedback_record)
        validate_feedback(feedback)
        assert feedback.timestamp

    @pytest.mark.parametrize(
        "field,value",
        [
            ("entry_id", ""),
            ("user_id", ""),
            ("original_category", "Sales"),
            ("corrected_category", None),
            ("feedback_type", "rewrite"),
            ("text_content", ""),
            ("timestamp", "yesterday"),
            ("original_category", 3),
            ("text_content", 42),
            ("original_mood", 7),
            ("timestamp", 1709285400),
        ],
    )
    def test_invalid_records(self, feedback_record, field, value):
        """Test that malformed records are rejected."""
        feedback_record[field] = value
        with pytest.raises(FeedbackValidationError):
            UserFeedback.from_dict(feedback_record)


class TestAnalysisResult:
    """Test suite for AnalysisResult."""

    def test_defaults(self):
        """Test optional fields default sensibly."""
        result = AnalysisResult(
            primary_mood="Focused",
            business_category=Category.PLANNING,
            confidence=80,
            energy=Energy.MEDIUM,
            mood_polarity=MoodPolarity.NEUTRAL,
        )
        assert result.rules_matched == []
        assert result.similarity_score == 0.0
        assert result.user_learned is False

    def test_confidence_bounds_enforced(self):
        """Test that confidence outside 0-100 is rejected."""
        with pytest.raises(PydanticValidationError):
            AnalysisResult(
                primary_mood="Focused",
                business_category=Category.PLANNING,
                confidence=101,
                energy=Energy.MEDIUM,
                mood_polarity=MoodPolarity.NEUTRAL,
            )

    def test_json_uses_label_values(self):
        """Test that serialized labels use their string values."""
        result = AnalysisResult(
            primary_mood="Excited",
            business_category=Category.GROWTH,
            confidence=90,
            energy=Energy.HIGH,
            mood_polarity=MoodPolarity.POSITIVE,
        )
        data = result.model_dump(mode="json")
        assert data["business_category"] == "Growth"
        assert data["energy"] == "high"
        assert data["mood_polarity"] == "Positive"
