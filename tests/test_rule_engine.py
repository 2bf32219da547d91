"""Tests for the business rule table and first-match evaluation."""

import pytest

from journal_insights.models.classification import Category, Energy, MoodPolarity
from journal_insights.models.rule import Rule, term_group
from journal_insights.processing.business_rules import BUSINESS_RULES
from journal_insights.processing.rule_engine import RuleEngine, normalize_text


@pytest.fixture
def engine():
    """Create a RuleEngine over the default rule table."""
    return RuleEngine()


def simple_rule(id, priority, *required, category=Category.GROWTH, excluded=()):
    return Rule(
        id=id,
        priority=priority,
        category=category,
        required=tuple(term_group(*group) for group in required),
        excluded=tuple(term_group(*group) for group in excluded),
    )


class TestRule:
    """Test suite for individual rule predicates."""

    def test_term_groups_are_anded(self):
        """Test that every required group has to match."""
        rule = simple_rule("R", 1, ["revenue"], ["record"])
        assert rule.matches("revenue hit a record")
        assert not rule.matches("revenue was flat")

    def test_word_boundaries(self):
        """Test that terms do not match inside longer words."""
        rule = simple_rule("R", 1, ["arr"])
        assert not rule.matches("we had to carry the load")
        assert rule.matches("arr is up")

    def test_exclusion_vetoes(self):
        """Test that any exclusion vetoes an otherwise matching rule."""
        rule = simple_rule("R", 1, ["website"], ["down"], excluded=[["costs are down"]])
        assert rule.matches("the website was down")
        assert not rule.matches("costs are down and the website is live")


class TestRuleEngine:
    """Test suite for RuleEngine."""

    def test_normalize_text(self):
        """Test lowercasing and whitespace collapsing."""
        assert normalize_text("  Cash   FLOW\n is tight ") == "cash flow is tight"

    def test_default_table_has_unique_ids(self):
        """Test that the bundled table builds without duplicate ids."""
        ids = [rule.id for rule in BUSINESS_RULES]
        assert len(ids) == len(set(ids))

    def test_rules_sorted_by_priority(self, engine):
        """Test that rules are evaluated highest priority first."""
        priorities = [rule.priority for rule in engine.rules]
        assert priorities == sorted(priorities, reverse=True)

    def test_duplicate_ids_rejected(self):
        """Test that duplicate rule ids are rejected at construction."""
        rules = [simple_rule("SAME", 2, ["a1"]), simple_rule("SAME", 1, ["b1"])]
        with pytest.raises(ValueError, match="Duplicate rule id"):
            RuleEngine(rules)

    def test_ties_keep_declaration_order(self):
        """Test that equal priorities are evaluated in declaration order."""
        rules = [
            simple_rule("FIRST", 5, ["launch"]),
            simple_rule("SECOND", 5, ["launch"]),
        ]
        assert RuleEngine(rules).first_match("launch day").id == "FIRST"

    def test_higher_priority_wins(self):
        """Test that a higher priority rule beats an earlier declared one."""
        rules = [
            simple_rule("LOW", 1, ["launch"]),
            simple_rule("HIGH", 9, ["launch"]),
        ]
        assert RuleEngine(rules).first_match("launch day").id == "HIGH"

    def test_no_match(self, engine):
        """Test that unrelated text matches no rule."""
        assert engine.first_match("Zebra xylophone quartet.") is None

    def test_supply_chain_rule(self, engine):
        """Test the supply chain disruption rule."""
        rule = engine.first_match(
            "Supplier delayed the raw material shipment by two weeks, and now our "
            "production schedule is at risk"
        )
        assert rule.id == "SUPPLY_CHAIN_DISRUPTION"
        assert rule.category == Category.CHALLENGE
        assert rule.energy == Energy.MEDIUM
        assert rule.mood_polarity == MoodPolarity.NEGATIVE

    def test_supply_chain_outranks_cash_flow(self, engine):
        """Test that overlapping rules resolve by priority."""
        rule = engine.first_match(
            "Supplier delayed the shipment again and our cash flow is tight"
        )
        assert rule.id == "SUPPLY_CHAIN_DISRUPTION"

    def test_revenue_milestone_rule(self, engine):
        """Test the revenue milestone rule."""
        rule = engine.first_match(
            "We closed five new accounts this week, and our monthly recurring "
            "revenue is now at an all-time high"
        )
        assert rule.id == "REVENUE_MILESTONE"
        assert rule.category == Category.GROWTH

    @pytest.mark.parametrize(
        "text",
        [
            "We closed the office early today because stress levels are high and morale is low",
            "Revenue dropped to its lowest point and we missed the quarterly milestone",
            "Sales hit a record low after we lost two accounts",
        ],
    )
    def test_revenue_milestone_needs_revenue_high(self, engine, text):
        """Test that closures, lows and losses never read as a revenue milestone."""
        rule = engine.first_match(text)
        assert rule is None or rule.id != "REVENUE_MILESTONE"

    def test_revenue_record_month(self, engine):
        """Test a record month of sales fires the revenue milestone rule."""
        assert engine.first_match("Sales hit a record month thanks to the new pricing").id == (
            "REVENUE_MILESTONE"
        )

    def test_outage_vetoed_by_cost_phrasing(self, engine):
        """Test that falling costs do not read as a platform outage."""
        text = (
            "our customer acquisition costs are down and the website redesign "
            "took hours"
        )
        assert engine.first_match(text) is None

    def test_outage_detected(self, engine):
        """Test that a genuine outage fires the outage rule."""
        assert engine.first_match("our website was down for six hours").id == "TECHNICAL_OUTAGE"

    def test_expansion_plans_are_not_expansion(self, engine):
        """Test that planning language vetoes the market expansion rule."""
        rule = engine.first_match("We are planning international expansion into a new market")
        assert rule is None or rule.id != "MARKET_EXPANSION"

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Cash flow is tight this month and we need to delay some payments", "CASH_FLOW_CRISIS"),
            ("Three major clients canceled their contracts this week", "CUSTOMER_CHURN"),
            ("Our lead engineer resigned yesterday", "TALENT_LOSS"),
            ("Just closed our Series B round with great investors", "FUNDING_SUCCESS"),
            ("Running A/B tests on our new onboarding flow", "EXPERIMENTATION"),
            ("Taking a coaching course to improve my leadership", "SKILL_DEVELOPMENT"),
        ],
    )
    def test_representative_entries(self, engine, text, expected):
        """Test representative entries against the default table."""
        assert engine.first_match(text).id == expected
