"""Schema for the classifier's output."""

from pydantic import BaseModel, Field

from .classification import Category, Energy, MoodPolarity


class AnalysisResult(BaseModel):
    """Schema for a journal entry analysis result."""

    primary_mood: str = Field(description="Concrete mood label, e.g. Excited")
    business_category: Category = Field(
        description="One of Growth, Challenge, Achievement, Planning, Learning, Research"
    )
    confidence: int = Field(ge=0, le=100, description="Calibrated confidence, 0-100")
    energy: Energy = Field(description="One of high, medium, low")
    mood_polarity: MoodPolarity = Field(description="Positive, Negative or Neutral")
    rules_matched: list[str] = Field(
        default_factory=list, description="Id of the rule that fired, if any"
    )
    similarity_score: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Best corpus similarity"
    )
    contrast_penalty: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Deduction for mixed sentiment"
    )
    user_learned: bool = Field(
        default=False, description="Whether a user correction changed the result"
    )
    rationale: str = Field(default="", description="Which signal decided the result")
    analyzer_version: str = Field(default="", description="Pipeline version")
