"""Public entry point for classifying journal entries."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import asdict
from typing import Any

from .config import SELF_CHECK_MIN_CONFIDENCE, AnalyzerConfig
from .exceptions import AnalysisError, DatasetValidationError
from .models.analysis import AnalysisResult
from .models.feedback import UserFeedback
from .models.rule import Rule
from .models.training import TrainingExample
from .pipeline import build_workflow, create_initial_state
from .processing.feedback_manager import FeedbackManager
from .processing.mood_normalizer import (
    analyze_text_complexity,
    detect_negation_context,
    negation_aware_score,
    sentiment_polarity,
)
from .processing.rule_engine import RuleEngine
from .processing.signal_fusion import SignalFusion
from .services.corpus_index import CorpusIndex
from .services.key_value_store import KeyValueStore
from .training_data import load_default_corpus
from .utils.error_handling import check_state_for_errors, create_fallback_result

logger = logging.getLogger(__name__)

# Reference entries that must classify confidently
SELF_CHECK_ENTRIES = (
    "Supplier delayed the raw material shipment by two weeks, and now our "
    "production schedule is at risk",
    "We closed five new accounts this week, and our monthly recurring revenue "
    "is now at an all-time high",
    "Finally published our first industry research paper - the team's hard "
    "work has paid off",
)


def _as_example(item: TrainingExample | Mapping[str, Any]) -> TrainingExample:
    if isinstance(item, TrainingExample):
        return item
    return TrainingExample.from_dict(item)


class JournalAnalyzer:
    """Classifies journal entries and learns from user corrections."""

    def __init__(
        self,
        corpus: Iterable[TrainingExample | Mapping[str, Any]] | None = None,
        rules: Iterable[Rule] | None = None,
        store: KeyValueStore | None = None,
        config: AnalyzerConfig | None = None,
    ) -> None:
        """Build the corpus index and compile the workflow.

        Args:
            corpus: Labeled examples (the bundled corpus by default)
            rules: Business rules (BUSINESS_RULES by default)
            store: Durable key-value store for user corrections
            config: Tuning values (defaults to AnalyzerConfig())

        Raises:
            DatasetValidationError: If the corpus is invalid

        """
        self.config = config or AnalyzerConfig()

        examples = load_default_corpus() if corpus is None else [_as_example(c) for c in corpus]
        self.corpus_index = CorpusIndex(
            examples, similarity_threshold=self.config.similarity_threshold
        )
        self.corpus_index.ensure_built()

        self.rule_engine = RuleEngine(rules)
        self.fusion = SignalFusion(self.rule_engine, self.corpus_index, self.config)
        self.feedback_manager = FeedbackManager(
            store, vectorizer=self.corpus_index.vectorizer, config=self.config
        )
        self.feedback_manager.load()

        self._workflow = build_workflow(
            self.rule_engine, self.corpus_index, self.fusion, self.feedback_manager
        )

    def classify_entry(self, text: str, user_id: str | None = None) -> AnalysisResult:
        """Classify a journal entry.

        Internal failures degrade to the error fallback instead of raising.

        Args:
            text: Free-form journal text
            user_id: User whose corrections should apply, if any

        Returns:
            AnalysisResult for the entry

        """
        try:
            state = self._workflow.invoke(create_initial_state(text, user_id))
        except DatasetValidationError:
            raise
        except Exception as e:
            logger.exception("Entry analysis failed")
            return create_fallback_result(e, self.config)

        if check_state_for_errors(state):
            logger.warning(f"Entry analysis degraded: {state['error']}")
            return create_fallback_result(state["error"], self.config)

        result = state.get("result")
        if result is None:
            return create_fallback_result(
                AnalysisError("Workflow produced no result"), self.config
            )
        return result

    def submit_feedback(self, feedback: UserFeedback | Mapping[str, Any]) -> None:
        """Record a user correction.

        Raises:
            FeedbackValidationError: If the correction is malformed

        """
        if not isinstance(feedback, UserFeedback):
            feedback = UserFeedback.from_dict(feedback)
        self.feedback_manager.record(feedback)

    def self_check(self) -> bool:
        """Verify the reference entries still classify with high confidence."""
        ok = True
        for text in SELF_CHECK_ENTRIES:
            result = self.classify_entry(text)
            if result.confidence < SELF_CHECK_MIN_CONFIDENCE:
                logger.warning(
                    f"Self-check failed: {result.business_category} at "
                    f"{result.confidence}% for {text[:50]!r}"
                )
                ok = False
        if ok:
            logger.info(f"Self-check passed for {len(SELF_CHECK_ENTRIES)} reference entries")
        return ok

    def explain(self, text: str, limit: int = 5) -> dict[str, Any]:
        """Describe the evidence behind a classification.

        Returns:
            Dictionary with the result, the matched rule, nearest examples,
            neighbour agreement, the most important terms and the
            negation-aware sentiment reading

        """
        result = self.classify_entry(text)
        rule = self.rule_engine.first_match(text)
        neighbours = self.corpus_index.top_matches(text, limit=limit)
        return {
            "result": result.model_dump(mode="json"),
            "rule": rule.id if rule is not None else None,
            "nearest_examples": [
                {
                    "id": m.example.id,
                    "category": str(m.example.expected_category),
                    "similarity": round(m.similarity, 3),
                }
                for m in neighbours
            ],
            "category_agreement": round(
                self.corpus_index.category_agreement(text, result.business_category), 3
            ),
            "important_terms": [
                term for term, _ in self.corpus_index.vectorizer.important_terms(text)
            ],
            "sentiment": {
                "score": round(negation_aware_score(text), 3),
                "polarity": str(sentiment_polarity(text)),
                "negation": asdict(detect_negation_context(text)),
                "complexity": asdict(analyze_text_complexity(text)),
            },
        }
