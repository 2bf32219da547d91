"""TF-IDF term vectors with bigrams and business-term boosting.

Tokenization, bigram generation and document frequencies come from
scikit-learn's TfidfVectorizer (smoothed IDF, no normalization). Query terms
that never occur in the corpus keep the smoothed weight for df=0 instead of
being dropped, so two texts can still be compared on vocabulary the corpus
has not seen.
"""

import re
from collections import Counter
from collections.abc import Sequence

import numpy as np
from sklearn.feature_extraction.text import TfidfVectorizer

from ..constants import DOMAIN_TERM_BOOSTS, MIN_TOKEN_LENGTH, STOP_WORDS

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_TOKEN_PATTERN = rf"(?u)\b[a-z0-9]{{{MIN_TOKEN_LENGTH},}}\b"

TermVector = dict[str, float]


def _preprocess(text: str) -> str:
    return _NON_ALNUM.sub(" ", text.lower())


def build_tfidf_model() -> TfidfVectorizer:
    """Create the unfitted scikit-learn model shared by every vectorizer."""
    return TfidfVectorizer(
        preprocessor=_preprocess,
        token_pattern=_TOKEN_PATTERN,
        stop_words=sorted(STOP_WORDS),
        ngram_range=(1, 2),
        norm=None,
        smooth_idf=True,
    )


_ANALYZER = build_tfidf_model().build_analyzer()


def analyze(text: str) -> list[str]:
    """Return the unigrams of a text followed by its adjacent-pair bigrams."""
    return _ANALYZER(text)


def cosine_similarity(a: TermVector, b: TermVector) -> float:
    """Calculate cosine similarity between two sparse term vectors.

    Args:
        a: First term vector
        b: Second term vector

    Returns:
        Similarity between 0 and 1, or 0 if either vector is empty

    """
    if not a or not b:
        return 0.0

    terms = sorted(a.keys() | b.keys())
    vec1 = np.array([a.get(t, 0.0) for t in terms])
    vec2 = np.array([b.get(t, 0.0) for t in terms])

    norm1 = np.linalg.norm(vec1)
    norm2 = np.linalg.norm(vec2)
    if norm1 == 0 or norm2 == 0:
        return 0.0

    similarity = float(np.dot(vec1, vec2) / (norm1 * norm2))
    return max(0.0, min(1.0, similarity))


class TermVectorizer:
    """Weights terms against document frequencies from a reference corpus."""

    def __init__(self, domain_boosts: dict[str, float] | None = None) -> None:
        self.domain_boosts = DOMAIN_TERM_BOOSTS if domain_boosts is None else domain_boosts
        self._documents: list[str] = []
        self._idf: dict[str, float] = {}
        self._document_frequency: dict[str, int] = {}

    @property
    def document_count(self) -> int:
        return len(self._documents)

    def document_frequency(self, term: str) -> int:
        return self._document_frequency.get(term, 0)

    def fit(self, documents: Sequence[str]) -> None:
        """Compute document frequencies and IDF weights for a corpus.

        Args:
            documents: Corpus texts; replaces any previously fitted corpus

        """
        self._documents = list(documents)
        self._idf = {}
        self._document_frequency = {}
        # TfidfVectorizer refuses to fit an empty vocabulary
        if not any(analyze(doc) for doc in self._documents):
            return

        model = build_tfidf_model()
        counts = model.fit_transform(self._documents)
        terms = model.get_feature_names_out()
        frequencies = np.asarray((counts > 0).sum(axis=0)).ravel()
        self._idf = dict(zip(terms, model.idf_.tolist()))
        self._document_frequency = dict(zip(terms, frequencies.tolist()))

    def add_document(self, text: str) -> None:
        """Add one corpus document and refit."""
        self.fit(self._documents + [text])

    def idf(self, term: str) -> float:
        """Smoothed IDF, ln((N+1)/(df+1)) + 1, for seen and unseen terms."""
        if term in self._idf:
            return self._idf[term]
        return float(np.log(self.document_count + 1)) + 1.0

    def vectorize(self, text: str) -> TermVector:
        """Produce the weighted term map for a text.

        Weight per term is occurrence count x IDF x domain boost.
        """
        counts = Counter(analyze(text))
        return {
            term: count * self.idf(term) * self.domain_boosts.get(term, 1.0)
            for term, count in counts.items()
        }

    def similarity(self, text1: str, text2: str) -> float:
        return cosine_similarity(self.vectorize(text1), self.vectorize(text2))

    def important_terms(self, text: str, top_n: int = 10) -> list[tuple[str, float]]:
        """Return the highest-weighted terms of a text, best first."""
        vector = self.vectorize(text)
        ranked = sorted(vector.items(), key=lambda x: (-x[1], x[0]))
        return ranked[:top_n]
