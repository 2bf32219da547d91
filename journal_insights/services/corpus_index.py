"""In-memory nearest-neighbour index over the labeled training corpus.

Queries scan every example, so cost grows with corpus size times vocabulary.
That is fine for a few hundred examples; larger corpora would need an
approximate nearest-neighbour structure.
"""

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass

from ..config import SIMILARITY_THRESHOLD, TOP_MATCH_MIN_SIMILARITY
from ..models.classification import Category
from ..models.training import TrainingExample, validate_dataset
from .vectorizer import TermVector, TermVectorizer, cosine_similarity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CorpusMatch:
    """A corpus example together with its similarity to a query."""

    example: TrainingExample
    similarity: float


class CorpusIndex:
    """Holds training examples and answers similarity queries."""

    def __init__(
        self,
        examples: Iterable[TrainingExample],
        vectorizer: TermVectorizer | None = None,
        similarity_threshold: float = SIMILARITY_THRESHOLD,
    ) -> None:
        """Store the examples; statistics are built on first use.

        Args:
            examples: Corpus entries, validated when the index is built
            vectorizer: Vectorizer to fit (a fresh one by default)
            similarity_threshold: Minimum similarity accepted by best_match

        """
        self._pending = list(examples)
        self.vectorizer = vectorizer or TermVectorizer()
        self.similarity_threshold = similarity_threshold
        self._examples: list[TrainingExample] = []
        self._vectors: list[TermVector] = []
        self._built = False
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        return self._built

    def ensure_built(self) -> None:
        """Validate the corpus and populate term statistics exactly once.

        Raises:
            DatasetValidationError: If the corpus violates an invariant

        """
        if self._built:
            return
        with self._lock:
            if self._built:
                return
            examples = validate_dataset(self._pending)
            self.vectorizer.fit([ex.text for ex in examples])
            self._vectors = [self.vectorizer.vectorize(ex.text) for ex in examples]
            self._examples = examples
            self._built = True
            logger.info(f"Corpus index built with {len(examples)} training examples")

    def __len__(self) -> int:
        self.ensure_built()
        return len(self._examples)

    def _scored(self, text: str) -> list[CorpusMatch]:
        self.ensure_built()
        query = self.vectorizer.vectorize(text)
        return [
            CorpusMatch(example, cosine_similarity(query, vector))
            for example, vector in zip(self._examples, self._vectors)
        ]

    def best_match(self, text: str) -> CorpusMatch | None:
        """Find the most similar example above the acceptance threshold.

        Args:
            text: Query text

        Returns:
            The best CorpusMatch, or None if nothing reaches the threshold

        """
        best: CorpusMatch | None = None
        for match in self._scored(text):
            if best is None or match.similarity > best.similarity:
                best = match

        if best is None or best.similarity < self.similarity_threshold:
            return None
        return best

    def top_matches(
        self,
        text: str,
        limit: int = 5,
        min_similarity: float = TOP_MATCH_MIN_SIMILARITY,
    ) -> list[CorpusMatch]:
        """Return up to limit examples at or above min_similarity, best first."""
        similar = [m for m in self._scored(text) if m.similarity >= min_similarity]
        return sorted(similar, key=lambda m: m.similarity, reverse=True)[:limit]

    def category_agreement(self, text: str, category: Category, k: int = 10) -> float:
        """Share of the k nearest accepted neighbours labeled with category.

        Returns 0.5 when no neighbour clears the acceptance threshold.
        """
        neighbours = self.top_matches(
            text, limit=k, min_similarity=self.similarity_threshold
        )
        if not neighbours:
            return 0.5
        agreeing = sum(1 for m in neighbours if m.example.expected_category == category)
        return agreeing / len(neighbours)
