"""Tests for the corpus nearest-neighbour index."""

import threading

import pytest

from journal_insights.exceptions import DatasetValidationError
from journal_insights.models.classification import Category, Energy
from journal_insights.models.training import TrainingExample
from journal_insights.services.corpus_index import CorpusIndex
from journal_insights.training_data import load_default_corpus


def make_example(id, text, category=Category.LEARNING):
    return TrainingExample(
        id=id,
        version=1,
        text=text,
        expected_category=category,
        expected_mood="Curious",
        expected_energy=Energy.MEDIUM,
        confidence_range=(70, 80),
    )


@pytest.fixture
def default_index():
    """Create an index over the bundled corpus."""
    return CorpusIndex(load_default_corpus())


class TestCorpusIndex:
    """Test suite for CorpusIndex."""

    def test_build_is_lazy(self, default_index):
        """Test that statistics are only built on first use."""
        assert default_index.is_built is False
        default_index.best_match("cash flow")
        assert default_index.is_built is True
        assert default_index.vectorizer.document_count == len(default_index)

    def test_build_runs_once_across_threads(self):
        """Test that concurrent first queries build the index exactly once."""
        index = CorpusIndex(load_default_corpus())
        threads = [
            threading.Thread(target=index.best_match, args=("cash flow is tight",))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert index.vectorizer.document_count == len(load_default_corpus())

    def test_every_example_matches_itself(self, default_index):
        """Test that each corpus text retrieves its own example."""
        for example in load_default_corpus():
            match = default_index.best_match(example.text)
            assert match is not None
            assert match.example.id == example.id
            assert match.similarity == pytest.approx(1.0)

    def test_unrelated_text_has_no_match(self, default_index):
        """Test that text sharing no vocabulary falls below the threshold."""
        assert default_index.best_match("Zebra xylophone quartet.") is None

    def test_threshold_is_respected(self):
        """Test that a weak neighbour is rejected by a strict threshold."""
        examples = [make_example("A", "payroll runs on friday for the whole team")]
        loose = CorpusIndex(examples, similarity_threshold=0.0)
        strict = CorpusIndex(examples, similarity_threshold=0.99)
        text = "payroll worries again"
        assert loose.best_match(text) is not None
        assert strict.best_match(text) is None

    def test_first_example_wins_ties(self):
        """Test that equally similar examples resolve to the earliest one."""
        examples = [
            make_example("FIRST", "quarterly board meeting", Category.PLANNING),
            make_example("SECOND", "quarterly board meeting", Category.RESEARCH),
        ]
        match = CorpusIndex(examples).best_match("quarterly board meeting")
        assert match.example.id == "FIRST"

    def test_duplicate_ids_rejected(self):
        """Test that a corpus with duplicate ids fails to build."""
        examples = [make_example("DUP", "first text"), make_example("DUP", "second text")]
        index = CorpusIndex(examples)
        with pytest.raises(DatasetValidationError, match="Duplicate id: DUP"):
            index.ensure_built()

    def test_top_matches_sorted_and_limited(self, default_index):
        """Test that top matches are ordered best first and capped."""
        matches = default_index.top_matches(
            "customer interviews and customer feedback", limit=3
        )
        assert 0 < len(matches) <= 3
        sims = [m.similarity for m in matches]
        assert sims == sorted(sims, reverse=True)
        assert all(s >= 0.15 for s in sims)

    def test_category_agreement(self, default_index):
        """Test agreement of nearest neighbours with a category."""
        text = "Supplier delayed the raw material shipment by two weeks"
        agreement = default_index.category_agreement(text, Category.CHALLENGE)
        assert 0.0 < agreement <= 1.0

    def test_category_agreement_without_neighbours(self, default_index):
        """Test that agreement is neutral when nothing is similar."""
        assert default_index.category_agreement("zebra", Category.GROWTH) == 0.5
