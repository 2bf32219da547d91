"""Weighted voting between the rule engine and the corpus index.

Both signals put weight on a category: the best corpus neighbour contributes
its similarity, a matching rule contributes a fixed rule weight. The winner's
margin over the runner-up sets the base confidence, which is then adjusted
for the rule's boost, contrastive phrasing and very short entries.
"""

import logging
from dataclasses import dataclass

from ..config import AnalyzerConfig
from ..constants import DEFAULT_MOOD
from ..models.analysis import AnalysisResult
from ..models.classification import Category, Energy, MoodPolarity
from ..models.rule import Rule
from ..services.corpus_index import CorpusIndex, CorpusMatch
from ..utils.error_handling import NO_PATTERN_RATIONALE, create_fallback_result
from .mood_normalizer import (
    contrast_penalty,
    infer_energy,
    mood_for,
    normalize_mood,
    sentiment_polarity,
)
from .rule_engine import RuleEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FusionScore:
    """Category decision and calibrated confidence for one entry."""

    category: Category
    confidence: int
    contrast_penalty: float
    rationale: str


def _describe(rule: Rule | None, match: CorpusMatch | None) -> str:
    parts = []
    if rule is not None:
        parts.append(f"rule {rule.id}")
    if match is not None:
        parts.append(f"corpus {match.example.id} ({match.similarity:.2f})")
    return " + ".join(parts) if parts else NO_PATTERN_RATIONALE


class SignalFusion:
    """Combines rule and corpus evidence into a draft analysis."""

    def __init__(
        self,
        rule_engine: RuleEngine,
        corpus_index: CorpusIndex,
        config: AnalyzerConfig | None = None,
    ) -> None:
        self.rule_engine = rule_engine
        self.corpus_index = corpus_index
        self.config = config or AnalyzerConfig()

    def score(
        self, text: str, rule: Rule | None, match: CorpusMatch | None
    ) -> FusionScore | None:
        """Pick the winning category and calibrate its confidence.

        Args:
            text: Raw entry text
            rule: First matching rule, if any
            match: Best corpus neighbour above the threshold, if any

        Returns:
            FusionScore, or None when neither signal is present

        """
        if rule is None and match is None:
            return None

        config = self.config
        # Insertion order puts the rule first so it wins ties
        scores: dict[Category, float] = {}
        if rule is not None:
            scores[rule.category] = config.rule_weight
        if match is not None:
            category = match.example.expected_category
            scores[category] = scores.get(category, 0.0) + match.similarity

        ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
        winner, top = ranked[0]
        runner_up = ranked[1][1] if len(ranked) > 1 else 0.0
        margin = top - runner_up

        confidence = config.base_confidence + min(
            config.max_margin_bonus, round(margin * config.margin_scale)
        )
        if rule is not None:
            confidence += rule.confidence_boost
        penalty = contrast_penalty(text)
        confidence -= round(penalty * 100)
        if len(text) < config.short_text_length:
            confidence -= config.short_text_penalty

        fused = FusionScore(
            category=winner,
            confidence=config.clamp_confidence(confidence),
            contrast_penalty=penalty,
            rationale=_describe(rule, match),
        )
        logger.debug(
            f"Fused {fused.rationale} -> {winner} "
            f"(margin={margin:.2f}, confidence={fused.confidence})"
        )
        return fused

    def resolve_labels(
        self,
        text: str,
        category: Category,
        rule: Rule | None,
        match: CorpusMatch | None,
    ) -> tuple[Energy, str, MoodPolarity]:
        """Choose energy, mood and polarity for the winning category."""
        if rule is not None and rule.energy is not None:
            energy = rule.energy
        elif match is not None and isinstance(match.example.expected_energy, Energy):
            energy = match.example.expected_energy
        else:
            energy = infer_energy(text)

        if rule is not None and rule.mood_polarity is not None:
            polarity = rule.mood_polarity
            mood = mood_for(polarity, energy, category)
        elif match is not None:
            mood, polarity = normalize_mood(match.example.expected_mood)
        else:
            mood = DEFAULT_MOOD
            polarity = sentiment_polarity(text)
        return energy, mood, polarity

    def assemble(
        self,
        text: str,
        fused: FusionScore | None,
        rule: Rule | None,
        match: CorpusMatch | None,
    ) -> AnalysisResult:
        """Resolve labels for a fused score and build the draft result.

        A missing score yields the no-pattern fallback.
        """
        if fused is None:
            return create_fallback_result(config=self.config, text=text)

        energy, mood, polarity = self.resolve_labels(text, fused.category, rule, match)
        return AnalysisResult(
            primary_mood=mood,
            business_category=fused.category,
            confidence=fused.confidence,
            energy=energy,
            mood_polarity=polarity,
            rules_matched=[rule.id] if rule is not None else [],
            similarity_score=match.similarity if match is not None else 0.0,
            contrast_penalty=fused.contrast_penalty,
            rationale=fused.rationale,
            analyzer_version=self.config.version,
        )

    def classify(self, text: str) -> AnalysisResult:
        """Run both matchers sequentially and fuse their output."""
        rule = self.rule_engine.first_match(text)
        match = self.corpus_index.best_match(text)
        return self.assemble(text, self.score(text, rule, match), rule, match)
