"""Mood polarity lookup, energy inference, contrast and negation detection."""

import re
from dataclasses import dataclass

from ..config import CONTRAST_PENALTY_PER_HIT, MAX_CONTRAST_PENALTY
from ..constants import (
    COMPLEX_CONJUNCTIONS,
    CONTRAST_WORDS,
    DAMPENER_WEIGHT,
    DAMPENERS,
    DEFAULT_MOOD,
    EXCLAMATION_WEIGHT,
    HIGH_ENERGY_SCORE,
    INTENSIFIER_WEIGHT,
    INTENSIFIERS,
    LONG_SENTENCE_WORDS,
    LOW_ENERGY_SCORE,
    MOOD_BY_SIGNAL,
    MOOD_POLARITIES,
    NEGATION_DAMPING,
    NEGATION_WINDOW,
    NEGATORS,
    SENTIMENT_LEXICON,
    SENTIMENT_POLARITY_THRESHOLD,
)
from ..models.classification import Category, Energy, MoodPolarity


def _word_pattern(words: tuple[str, ...]) -> re.Pattern:
    alternation = "|".join(r"\s+".join(map(re.escape, w.split())) for w in words)
    return re.compile(r"\b(?:" + alternation + r")\b")


_INTENSIFIER_PATTERN = _word_pattern(INTENSIFIERS)
_DAMPENER_PATTERN = _word_pattern(DAMPENERS)
_CONTRAST_PATTERN = _word_pattern(CONTRAST_WORDS)
_COMPLEX_PATTERN = _word_pattern(COMPLEX_CONJUNCTIONS)
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_SENTENCE_SPLIT = re.compile(r"[.!?]+")
_CAPS_RUN = re.compile(r"[A-Z]{2,}")


def polarity_of(mood_label: str | None) -> MoodPolarity:
    """Map a mood label to its polarity; unknown labels are Neutral."""
    if not mood_label:
        return MoodPolarity.NEUTRAL
    polarity = MOOD_POLARITIES.get(mood_label.strip().lower())
    return MoodPolarity.from_string(polarity) or MoodPolarity.NEUTRAL


def normalize_mood(mood_label: str | None) -> tuple[str, MoodPolarity]:
    """Tidy a raw mood label and pair it with its polarity.

    Empty labels become the default mood.
    """
    label = (mood_label or "").strip()
    if not label:
        label = DEFAULT_MOOD
    label = label[0].upper() + label[1:]
    return label, polarity_of(label)


def mood_for(polarity: MoodPolarity, energy: Energy, category: Category) -> str:
    """Pick a concrete mood label for a polarity in context."""
    for key in (
        (polarity.value, energy.value, category.value),
        (polarity.value, energy.value, None),
        (polarity.value, None, category.value),
        (polarity.value, None, None),
    ):
        if key in MOOD_BY_SIGNAL:
            return MOOD_BY_SIGNAL[key]
    return DEFAULT_MOOD


def infer_energy(text: str) -> Energy:
    """Infer energy from exclamations, intensifiers and dampeners."""
    lowered = text.lower()
    exclamations = lowered.count("!")
    intensifiers = len(_INTENSIFIER_PATTERN.findall(lowered))
    dampeners = len(_DAMPENER_PATTERN.findall(lowered))

    score = (
        EXCLAMATION_WEIGHT * exclamations
        + INTENSIFIER_WEIGHT * intensifiers
        - DAMPENER_WEIGHT * dampeners
    )
    if score >= HIGH_ENERGY_SCORE:
        return Energy.HIGH
    if score <= LOW_ENERGY_SCORE:
        return Energy.LOW
    return Energy.MEDIUM


def contrast_penalty(text: str) -> float:
    """Confidence deduction (0-0.15) for contrastive connectives."""
    hits = len(_CONTRAST_PATTERN.findall(text.lower()))
    return min(hits * CONTRAST_PENALTY_PER_HIT, MAX_CONTRAST_PENALTY)


@dataclass(frozen=True)
class NegationContext:
    """Negation and contrast cues found in a text."""

    has_negation: bool
    has_contrast: bool
    negation_strength: float
    contrast_strength: float


@dataclass(frozen=True)
class TextComplexity:
    """Sentence structure and emotional intensity of a text."""

    sentence_count: int
    avg_words_per_sentence: float
    has_complex_structure: bool
    emotional_intensity: float


def _words(text: str) -> list[str]:
    return _NON_ALNUM.sub(" ", text.lower()).split()


def negation_aware_score(text: str) -> float:
    """Sum lexicon sentiment over the words of a text.

    A negator flips and damps the weight of the next three words, so "not a
    failure" scores positive.
    """
    score = 0.0
    window = 0
    for word in _words(text):
        if word in NEGATORS:
            window = NEGATION_WINDOW
            continue
        weight = SENTIMENT_LEXICON.get(word, 0.0)
        if window > 0:
            weight = -weight * NEGATION_DAMPING
            window -= 1
        score += weight
    return score


def sentiment_polarity(text: str) -> MoodPolarity:
    """Polarity implied by the negation-aware score of a text."""
    score = negation_aware_score(text)
    if score >= SENTIMENT_POLARITY_THRESHOLD:
        return MoodPolarity.POSITIVE
    if score <= -SENTIMENT_POLARITY_THRESHOLD:
        return MoodPolarity.NEGATIVE
    return MoodPolarity.NEUTRAL


def detect_negation_context(text: str) -> NegationContext:
    """Measure how much negation and contrast a text carries."""
    negations = sum(1 for word in _words(text) if word in NEGATORS)
    connectives = len(set(_CONTRAST_PATTERN.findall(text.lower())))
    return NegationContext(
        has_negation=negations > 0,
        has_contrast=connectives > 0,
        negation_strength=min(negations * 0.2, 1.0),
        contrast_strength=min(connectives * 0.15, 0.6),
    )


def analyze_text_complexity(text: str) -> TextComplexity:
    """Describe sentence structure and emotional intensity."""
    sentences = [s for s in _SENTENCE_SPLIT.split(text) if s.strip()]
    words = _words(text)
    sentence_count = len(sentences)
    avg_words = len(words) / max(sentence_count, 1)

    lowered = text.lower()
    intensity = 0.0
    if words:
        raw = (
            0.3 * text.count("!")
            + 0.2 * len(_CAPS_RUN.findall(text))
            + 0.4 * len(_INTENSIFIER_PATTERN.findall(lowered))
        )
        intensity = min(raw / len(words) * 100, 1.0)

    return TextComplexity(
        sentence_count=sentence_count,
        avg_words_per_sentence=round(avg_words, 2),
        has_complex_structure=bool(_COMPLEX_PATTERN.search(lowered))
        or avg_words > LONG_SENTENCE_WORDS,
        emotional_intensity=round(intensity, 3),
    )
