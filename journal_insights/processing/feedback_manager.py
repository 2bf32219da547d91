"""Manages user corrections for per-user classification learning."""

import json
import logging
import threading
from collections import deque
from typing import Any

from ..config import AnalyzerConfig
from ..exceptions import FeedbackValidationError
from ..models.analysis import AnalysisResult
from ..models.feedback import UserFeedback, validate_feedback
from ..services.key_value_store import InMemoryKeyValueStore, KeyValueStore
from ..services.vectorizer import TermVectorizer, cosine_similarity
from ..utils.statistics import (
    CorrectionTrend,
    FeedbackStatistics,
    calculate_correction_trends,
    calculate_feedback_statistics,
)
from .mood_normalizer import contrast_penalty, normalize_mood

logger = logging.getLogger(__name__)


class FeedbackManager:
    """Bounded, persisted log of user corrections.

    Entries live in a ring buffer; once it is full the oldest correction is
    evicted. Every change is written through to the key-value store, but a
    failing store never interrupts classification.
    """

    def __init__(
        self,
        store: KeyValueStore | None = None,
        vectorizer: TermVectorizer | None = None,
        config: AnalyzerConfig | None = None,
    ) -> None:
        """Initialize an empty feedback log.

        Args:
            store: Durable key-value store (in-memory by default)
            vectorizer: Vectorizer used to compare entry texts, normally the
                one populated by the corpus index
            config: Tuning values (defaults to AnalyzerConfig())

        """
        self.config = config or AnalyzerConfig()
        self.store = store if store is not None else InMemoryKeyValueStore()
        self.vectorizer = vectorizer or TermVectorizer()
        self._feedback: deque[UserFeedback] = deque(maxlen=self.config.feedback_capacity)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._feedback)

    def _snapshot(self) -> list[UserFeedback]:
        with self._lock:
            return list(self._feedback)

    def _persist_locked(self) -> None:
        """Write the buffer to the store; caller holds the lock."""
        payload = json.dumps([f.to_dict() for f in self._feedback]).encode("utf-8")
        try:
            self.store.set(self.config.feedback_storage_key, payload)
        except Exception as e:
            logger.warning(f"Failed to persist {len(self._feedback)} feedback entries: {e!s}")

    def record(self, feedback: UserFeedback) -> None:
        """Validate and store a user correction.

        Args:
            feedback: The correction to learn from

        Raises:
            FeedbackValidationError: If the correction is malformed

        """
        validate_feedback(feedback)
        with self._lock:
            self._feedback.append(feedback)
            self._persist_locked()
        logger.info(
            f"Recorded {feedback.feedback_type} for entry {feedback.entry_id}: "
            f"{feedback.original_category} -> {feedback.corrected_category}"
        )

    def load(self) -> int:
        """Hydrate the buffer from the store.

        Missing, unreadable or corrupt data is logged and ignored.

        Returns:
            Number of corrections loaded

        """
        key = self.config.feedback_storage_key
        try:
            raw = self.store.get(key)
        except Exception as e:
            logger.warning(f"Could not read stored feedback '{key}': {e!s}")
            return 0
        if raw is None:
            return 0

        try:
            records = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring corrupt feedback data under '{key}': {e!s}")
            return 0
        if not isinstance(records, list):
            logger.warning(f"Ignoring feedback data under '{key}': expected a list")
            return 0

        loaded: list[UserFeedback] = []
        for record in records:
            if not isinstance(record, dict):
                logger.warning(f"Skipping non-object feedback record: {record!r}")
                continue
            try:
                loaded.append(UserFeedback.from_dict(record))
            except FeedbackValidationError as e:
                logger.warning(f"Skipping invalid feedback record: {e!s}")

        with self._lock:
            self._feedback.clear()
            self._feedback.extend(loaded)
            count = len(self._feedback)
        logger.info(f"Loaded {count} feedback entries from store")
        return count

    def adjust(self, text: str, draft: AnalysisResult, user_id: str) -> AnalysisResult:
        """Apply the closest past correction by this user to a draft result.

        Args:
            text: Entry text being classified
            draft: Result produced by signal fusion
            user_id: User whose corrections apply

        Returns:
            The adjusted result, or the draft itself when no correction is
            similar enough

        """
        with self._lock:
            history = [f for f in self._feedback if f.user_id == user_id]
        history = history[-self.config.feedback_history_size:]
        if not history:
            return draft

        query = self.vectorizer.vectorize(text)
        best: UserFeedback | None = None
        best_similarity = 0.0
        # Newest first so the latest correction wins ties
        for feedback in reversed(history):
            similarity = cosine_similarity(
                query, self.vectorizer.vectorize(feedback.text_content)
            )
            if best is None or similarity > best_similarity:
                best, best_similarity = feedback, similarity

        if best is None or best_similarity < self.config.feedback_similarity_threshold:
            logger.debug(f"No correction close enough for user {user_id} ({best_similarity:.2f})")
            return draft

        category = draft.business_category
        if best.feedback_type.corrects_category:
            category = best.corrected_category

        mood = draft.primary_mood
        polarity = draft.mood_polarity
        if best.feedback_type.corrects_mood and best.corrected_mood.strip():
            mood, polarity = normalize_mood(best.corrected_mood)

        penalty = contrast_penalty(text)
        confidence = self.config.clamp_confidence(
            draft.confidence
            + round(best_similarity * self.config.feedback_similarity_scale)
            - round(penalty * 100)
        )

        logger.info(
            f"Applied correction {best.entry_id} for user {user_id} "
            f"(similarity={best_similarity:.2f}): {draft.business_category} -> {category}"
        )
        return draft.model_copy(
            update={
                "business_category": category,
                "primary_mood": mood,
                "mood_polarity": polarity,
                "confidence": confidence,
                "contrast_penalty": penalty,
                "user_learned": True,
                "rationale": f"{draft.rationale}; learned from {best.entry_id}",
            }
        )

    def get_user_feedback(self, user_id: str) -> list[UserFeedback]:
        """Get a user's corrections, oldest first."""
        return [f for f in self._snapshot() if f.user_id == user_id]

    def has_feedback(self, user_id: str) -> bool:
        """Check if a user has any stored corrections."""
        return any(f.user_id == user_id for f in self._snapshot())

    def get_statistics(self, user_id: str | None = None) -> FeedbackStatistics:
        """Summarize corrections for one user, or for everyone."""
        entries = self._snapshot()
        if user_id is not None:
            entries = [f for f in entries if f.user_id == user_id]
        return calculate_feedback_statistics(entries)

    def get_correction_trends(self, user_id: str | None = None) -> CorrectionTrend:
        """Count which labels get corrected into which."""
        entries = self._snapshot()
        if user_id is not None:
            entries = [f for f in entries if f.user_id == user_id]
        return calculate_correction_trends(entries)

    def export(self, user_id: str | None = None) -> list[dict[str, Any]]:
        """Export corrections as plain dictionaries."""
        entries = self._snapshot()
        if user_id is not None:
            entries = [f for f in entries if f.user_id == user_id]
        return [f.to_dict() for f in entries]

    def clear(self, user_id: str | None = None) -> int:
        """Remove corrections for one user, or all of them.

        Returns:
            Number of corrections removed

        """
        with self._lock:
            before = len(self._feedback)
            if user_id is None:
                self._feedback.clear()
            else:
                kept = [f for f in self._feedback if f.user_id != user_id]
                self._feedback.clear()
                self._feedback.extend(kept)
            removed = before - len(self._feedback)
            self._persist_locked()
        logger.info(f"Cleared {removed} feedback entries")
        return removed
