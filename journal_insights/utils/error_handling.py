"""Standardized fallback results and error helpers for the analysis pipeline."""

from collections.abc import Mapping
from typing import Any

from ..config import AnalyzerConfig
from ..constants import DEFAULT_MOOD
from ..models.analysis import AnalysisResult
from ..models.classification import Category, Energy, MoodPolarity
from ..processing.mood_normalizer import contrast_penalty

NO_PATTERN_RATIONALE = "no pattern detected"


def create_fallback_result(
    error: Exception | str | None = None,
    config: AnalyzerConfig | None = None,
    text: str = "",
) -> AnalysisResult:
    """Create the degraded result returned when nothing can be inferred.

    Args:
        error: The error that occurred, or None when no signal matched
        config: Tuning values (defaults to AnalyzerConfig())
        text: Entry text, used to report its contrast penalty

    Returns:
        A Learning / Thoughtful / medium result with fallback confidence

    """
    config = config or AnalyzerConfig()
    if error is None:
        confidence = config.fallback_confidence
        rationale = NO_PATTERN_RATIONALE
    else:
        error_message = str(error) if isinstance(error, Exception) else error
        confidence = config.error_confidence
        rationale = f"Error during processing: {error_message}"

    return AnalysisResult(
        primary_mood=DEFAULT_MOOD,
        business_category=Category.LEARNING,
        confidence=confidence,
        energy=Energy.MEDIUM,
        mood_polarity=MoodPolarity.NEUTRAL,
        contrast_penalty=contrast_penalty(text),
        rationale=rationale,
        analyzer_version=config.version,
    )


def create_error_response(error: Exception | str) -> dict[str, str]:
    """Create the partial state update a pipeline node returns on failure."""
    error_message = str(error) if isinstance(error, Exception) else error
    return {"error": error_message}


def check_state_for_errors(state: Mapping[str, Any]) -> bool:
    """Check if a pipeline state contains errors.

    Args:
        state: The entry state to check

    Returns:
        True if state contains errors, False otherwise

    """
    return bool(state.get("error"))
