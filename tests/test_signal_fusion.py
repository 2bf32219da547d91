"""Tests for weighted signal fusion and confidence calibration."""

import pytest

from journal_insights.config import AnalyzerConfig
from journal_insights.models.classification import Category, Energy, MoodPolarity
from journal_insights.models.rule import Rule, term_group
from journal_insights.models.training import TrainingExample
from journal_insights.processing.rule_engine import RuleEngine
from journal_insights.processing.signal_fusion import SignalFusion
from journal_insights.services.corpus_index import CorpusIndex, CorpusMatch
from journal_insights.training_data import load_default_corpus

LAUNCH_TEXT = (
    "We launched the new dashboard and customers responded with enthusiasm "
    "everywhere today"
)


def make_example(id, text, category, mood="Curious", energy=Energy.MEDIUM):
    return TrainingExample(
        id=id,
        version=1,
        text=text,
        expected_category=category,
        expected_mood=mood,
        expected_energy=energy,
        confidence_range=(70, 90),
    )


@pytest.fixture
def launch_rule():
    """Create a single positive achievement rule."""
    return Rule(
        id="LAUNCH_WIN",
        priority=10,
        category=Category.ACHIEVEMENT,
        required=(term_group("launched"), term_group("customers")),
        energy=Energy.HIGH,
        mood_polarity=MoodPolarity.POSITIVE,
        confidence_boost=5,
    )


@pytest.fixture
def rule_only_fusion(launch_rule):
    """Create a fusion whose corpus never matches the launch text."""
    corpus = [
        make_example("TAX_001", "Quarterly tax filing reminder for accountants", Category.PLANNING)
    ]
    return SignalFusion(RuleEngine([launch_rule]), CorpusIndex(corpus))


@pytest.fixture
def default_fusion():
    """Create a fusion over the bundled rules and corpus."""
    return SignalFusion(RuleEngine(), CorpusIndex(load_default_corpus()))


class TestScore:
    """Test suite for category voting and confidence calibration."""

    def test_no_signal_returns_none(self, rule_only_fusion):
        """Test that scoring without any signal yields nothing."""
        assert rule_only_fusion.score("anything", None, None) is None

    def test_rule_only_confidence(self, rule_only_fusion, launch_rule):
        """Test base + margin bonus + rule boost for a rule-only decision."""
        fused = rule_only_fusion.score(LAUNCH_TEXT, launch_rule, None)
        # 60 + round(0.95 * 25) + 5
        assert fused.confidence == 89
        assert fused.category == Category.ACHIEVEMENT
        assert fused.rationale == "rule LAUNCH_WIN"

    def test_contrast_lowers_confidence(self, rule_only_fusion, launch_rule):
        """Test that adding a contrastive clause never raises confidence."""
        plain = rule_only_fusion.score(LAUNCH_TEXT, launch_rule, None)
        mixed = rule_only_fusion.score(
            LAUNCH_TEXT + " but support tickets piled up", launch_rule, None
        )
        assert mixed.confidence == plain.confidence - 5
        assert mixed.contrast_penalty == pytest.approx(0.05)

    def test_short_text_penalty(self, rule_only_fusion, launch_rule):
        """Test the deduction for entries under 60 characters."""
        fused = rule_only_fusion.score("We launched and customers cheered", launch_rule, None)
        assert fused.confidence == 89 - 8

    def test_agreeing_signals_hit_the_ceiling(self, rule_only_fusion, launch_rule):
        """Test that agreeing rule and corpus evidence clamp to 95."""
        example = make_example("LAUNCH_001", LAUNCH_TEXT, Category.ACHIEVEMENT)
        fused = rule_only_fusion.score(LAUNCH_TEXT, launch_rule, CorpusMatch(example, 1.0))
        assert fused.confidence == 95

    def test_disagreeing_signals_use_margin(self, rule_only_fusion, launch_rule):
        """Test that conflicting evidence shrinks the margin bonus."""
        example = make_example("PLAN_001", "roadmap", Category.PLANNING)
        fused = rule_only_fusion.score(LAUNCH_TEXT, launch_rule, CorpusMatch(example, 0.55))
        # margin 0.40 -> +10, plus rule boost 5
        assert fused.category == Category.ACHIEVEMENT
        assert fused.confidence == 75

    def test_stronger_corpus_match_wins(self, rule_only_fusion, launch_rule):
        """Test that the corpus category wins when it outscores the rule."""
        weak_rule = Rule(
            id="WEAK",
            priority=1,
            category=Category.LEARNING,
            required=(term_group("launched"),),
            confidence_boost=0,
        )
        config = AnalyzerConfig(rule_weight=0.3)
        fusion = SignalFusion(RuleEngine([weak_rule]), rule_only_fusion.corpus_index, config)
        example = make_example("PLAN_001", "roadmap", Category.PLANNING)
        fused = fusion.score(LAUNCH_TEXT, weak_rule, CorpusMatch(example, 0.9))
        assert fused.category == Category.PLANNING

    def test_ties_favor_rule_category(self, rule_only_fusion, launch_rule):
        """Test that an exact tie resolves to the rule's category."""
        example = make_example("PLAN_001", "roadmap", Category.PLANNING)
        fused = rule_only_fusion.score(LAUNCH_TEXT, launch_rule, CorpusMatch(example, 0.95))
        assert fused.category == Category.ACHIEVEMENT

    def test_confidence_floor(self, rule_only_fusion, launch_rule):
        """Test that confidence never drops below 40."""
        example = make_example("PLAN_001", "roadmap", Category.PLANNING)
        text = "launched for customers but yet though"
        fused = rule_only_fusion.score(text, launch_rule, CorpusMatch(example, 0.95))
        assert fused.confidence >= 40


class TestClassify:
    """Test suite for end-to-end draft classification."""

    def test_rule_mood_lookup(self, rule_only_fusion):
        """Test that a rule's polarity drives the mood label."""
        result = rule_only_fusion.classify(LAUNCH_TEXT)
        assert result.primary_mood == "Proud"
        assert result.mood_polarity == MoodPolarity.POSITIVE
        assert result.energy == Energy.HIGH
        assert result.rules_matched == ["LAUNCH_WIN"]
        assert result.similarity_score == 0.0

    def test_corpus_only_uses_example_labels(self):
        """Test that a corpus-only match inherits the example's labels."""
        corpus = [
            make_example(
                "BOARD_001",
                "Quarterly board meeting prep with investors",
                Category.PLANNING,
                mood="methodical",
            )
        ]
        fusion = SignalFusion(RuleEngine([]), CorpusIndex(corpus))
        result = fusion.classify("Quarterly board meeting prep with investors")
        assert result.business_category == Category.PLANNING
        assert result.primary_mood == "Methodical"
        assert result.mood_polarity == MoodPolarity.NEUTRAL
        assert result.energy == Energy.MEDIUM
        assert result.rules_matched == []

    def test_fallback(self, default_fusion):
        """Test the result when neither signal is present."""
        result = default_fusion.classify("Zebra xylophone quartet.")
        assert result.business_category == Category.LEARNING
        assert result.primary_mood == "Thoughtful"
        assert result.energy == Energy.MEDIUM
        assert result.confidence == 45
        assert result.rationale == "no pattern detected"

    def test_supply_chain_entry(self, default_fusion):
        """Test the supply chain reference entry."""
        result = default_fusion.classify(
            "Supplier delayed the raw material shipment by two weeks, and now our "
            "production schedule is at risk"
        )
        assert result.business_category == Category.CHALLENGE
        assert result.mood_polarity == MoodPolarity.NEGATIVE
        assert result.primary_mood == "Frustrated"
        assert result.confidence >= 80

    def test_results_are_bounded(self, default_fusion):
        """Test confidence and score bounds over the bundled corpus."""
        for example in load_default_corpus():
            result = default_fusion.classify(example.text)
            assert 40 <= result.confidence <= 95
            assert 0.0 <= result.similarity_score <= 1.0
            assert 0.0 <= result.contrast_penalty <= 0.15
            assert len(result.rules_matched) <= 1

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Inventory audit found another problem and a serious setback", MoodPolarity.NEGATIVE),
            ("Inventory audit was not a failure", MoodPolarity.POSITIVE),
            ("Inventory audit finished on schedule", MoodPolarity.NEUTRAL),
        ],
    )
    def test_sentiment_decides_polarity_without_labels(self, text, expected):
        """Test that sentiment sets polarity when no rule or example does."""
        rule = Rule(
            id="INVENTORY",
            priority=1,
            category=Category.PLANNING,
            required=(term_group("inventory"),),
        )
        corpus = [
            make_example("TAX_001", "Quarterly tax filing reminder for accountants", Category.PLANNING)
        ]
        fusion = SignalFusion(RuleEngine([rule]), CorpusIndex(corpus))

        result = fusion.classify(text)
        assert result.rules_matched == ["INVENTORY"]
        assert result.primary_mood == "Thoughtful"
        assert result.mood_polarity == expected
