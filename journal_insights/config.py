"""Configuration settings for Journal Insights."""

import os
from dataclasses import dataclass, fields

ANALYZER_VERSION = "3.0.0"

# Corpus retrieval
SIMILARITY_THRESHOLD = 0.22  # Below this, a corpus neighbour is ignored
TOP_MATCH_MIN_SIMILARITY = 0.15

# Signal fusion
RULE_WEIGHT = 0.95
BASE_CONFIDENCE = 60
MARGIN_SCALE = 25
MAX_MARGIN_BONUS = 30
SHORT_TEXT_LENGTH = 60
SHORT_TEXT_PENALTY = 8
MIN_CONFIDENCE = 40
MAX_CONFIDENCE = 95
FALLBACK_CONFIDENCE = 45
ERROR_CONFIDENCE = 40

# Contrast penalty
CONTRAST_PENALTY_PER_HIT = 0.05
MAX_CONTRAST_PENALTY = 0.15

# Feedback learning
FEEDBACK_CAPACITY = 1000
FEEDBACK_HISTORY_SIZE = 200
FEEDBACK_SIMILARITY_THRESHOLD = 0.40
FEEDBACK_SIMILARITY_SCALE = 20
FEEDBACK_STORAGE_KEY = "ai_user_corrections"

# Self-check
SELF_CHECK_MIN_CONFIDENCE = 80

# Logging configuration
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = "INFO"

ENV_PREFIX = "JOURNAL_INSIGHTS_"


@dataclass(frozen=True)
class AnalyzerConfig:
    """Tuning values passed explicitly into the classification pipeline."""

    version: str = ANALYZER_VERSION
    similarity_threshold: float = SIMILARITY_THRESHOLD
    rule_weight: float = RULE_WEIGHT
    base_confidence: int = BASE_CONFIDENCE
    margin_scale: int = MARGIN_SCALE
    max_margin_bonus: int = MAX_MARGIN_BONUS
    short_text_length: int = SHORT_TEXT_LENGTH
    short_text_penalty: int = SHORT_TEXT_PENALTY
    min_confidence: int = MIN_CONFIDENCE
    max_confidence: int = MAX_CONFIDENCE
    fallback_confidence: int = FALLBACK_CONFIDENCE
    error_confidence: int = ERROR_CONFIDENCE
    feedback_capacity: int = FEEDBACK_CAPACITY
    feedback_history_size: int = FEEDBACK_HISTORY_SIZE
    feedback_similarity_threshold: float = FEEDBACK_SIMILARITY_THRESHOLD
    feedback_similarity_scale: int = FEEDBACK_SIMILARITY_SCALE
    feedback_storage_key: str = FEEDBACK_STORAGE_KEY

    def clamp_confidence(self, value: float) -> int:
        """Clamp a confidence score to the configured range."""
        return int(max(self.min_confidence, min(self.max_confidence, value)))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "AnalyzerConfig":
        """Build a config, overriding defaults from JOURNAL_INSIGHTS_* variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            AnalyzerConfig with any overrides applied

        Raises:
            ValueError: If an override cannot be converted to the field type

        """
        env = os.environ if environ is None else environ
        overrides: dict[str, str | int | float] = {}
        for f in fields(cls):
            raw = env.get(f"{ENV_PREFIX}{f.name.upper()}")
            if raw is None:
                continue
            default = f.default
            if isinstance(default, str):
                overrides[f.name] = raw
            elif isinstance(default, int):
                overrides[f.name] = int(raw)
            else:
                overrides[f.name] = float(raw)
        return cls(**overrides)
