"""Custom exceptions for Journal Insights."""


class JournalInsightsError(Exception):
    """Base exception for Journal Insights."""

    pass


class DatasetValidationError(JournalInsightsError):
    """Raised when the training corpus violates an invariant."""

    pass


class ValidationError(JournalInsightsError):
    """Raised when input validation fails."""

    pass


class FeedbackValidationError(ValidationError):
    """Raised when a user correction is malformed."""

    pass


class PersistenceError(JournalInsightsError):
    """Raised when the durable feedback store cannot be read or written."""

    pass


class AnalysisError(JournalInsightsError):
    """Raised when the classification pipeline fails internally."""

    pass
