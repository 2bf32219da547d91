"""Journal Insights - business classification of entrepreneurs' journal entries."""

from .analyzer import JournalAnalyzer
from .config import ANALYZER_VERSION, AnalyzerConfig
from .exceptions import (
    AnalysisError,
    DatasetValidationError,
    FeedbackValidationError,
    JournalInsightsError,
    PersistenceError,
    ValidationError,
)
from .models.analysis import AnalysisResult
from .models.classification import Category, Energy, FeedbackType, MoodPolarity
from .models.feedback import UserFeedback

__version__ = ANALYZER_VERSION
__all__ = [
    "ANALYZER_VERSION",
    "AnalysisError",
    "AnalysisResult",
    "AnalyzerConfig",
    "Category",
    "DatasetValidationError",
    "Energy",
    "FeedbackType",
    "FeedbackValidationError",
    "JournalAnalyzer",
    "JournalInsightsError",
    "MoodPolarity",
    "PersistenceError",
    "UserFeedback",
    "ValidationError",
]
