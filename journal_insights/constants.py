"""Lexical tables used throughout Journal Insights."""

# Tokenization
MIN_TOKEN_LENGTH = 3

STOP_WORDS = frozenset(
    [
        "the", "and", "for", "with", "that", "this", "have", "has", "but", "are",
        "was", "were", "you", "your", "our", "from", "into", "about", "not", "too",
        "very", "just", "also", "can", "will", "would", "could", "should", "may",
        "might", "must", "shall", "been", "being", "had", "did", "does", "done",
        "get", "got", "getting", "make", "made", "making", "take", "took", "taking",
        "come", "came", "coming", "went", "going",
    ]
)

# Business vocabulary that is rare in the corpus but highly discriminative
DOMAIN_TERM_BOOSTS: dict[str, float] = {
    "cash flow": 1.5,
    "revenue": 1.3,
    "gross margin": 1.4,
    "customer": 1.2,
    "client": 1.2,
    "churn": 1.5,
    "mrr": 1.6,
    "launch": 1.2,
    "hiring": 1.3,
    "funding": 1.4,
    "kpi": 1.4,
    "roadmap": 1.3,
    "onboarding": 1.3,
    "retention": 1.5,
    "partnership": 1.3,
    "competitor": 1.3,
    "expansion": 1.2,
    "supplier": 1.4,
    "shipment": 1.3,
    "production": 1.3,
    "accounts": 1.3,
    "recurring": 1.4,
    "startup": 1.3,
    "growth": 1.2,
    "scale": 1.3,
    "pivot": 1.4,
    "burn rate": 1.5,
    "runway": 1.4,
    "valuation": 1.3,
    "equity": 1.3,
    "user acquisition": 1.4,
    "conversion": 1.3,
    "metrics": 1.2,
    "analytics": 1.2,
    "engagement": 1.3,
    "activation": 1.3,
    "milestone": 1.2,
    "deadline": 1.2,
    "budget": 1.3,
    "profit": 1.4,
    "loss": 1.3,
    "investment": 1.3,
    "roi": 1.4,
    "cac": 1.5,
    "ltv": 1.5,
    "arpu": 1.4,
    "market share": 1.3,
}

# Energy inference
EXCLAMATION_WEIGHT = 0.6
INTENSIFIER_WEIGHT = 0.5
DAMPENER_WEIGHT = 0.4
HIGH_ENERGY_SCORE = 0.8
LOW_ENERGY_SCORE = -0.2

INTENSIFIERS = (
    "very", "extremely", "incredibly", "so", "really", "totally", "absolutely",
    "highly", "tremendously", "exceptionally", "remarkably", "significantly",
    "substantially", "considerably",
)

DAMPENERS = (
    "slightly", "somewhat", "a bit", "kinda", "fairly", "moderately", "rather",
    "relatively", "partially", "mildly", "barely", "hardly", "scarcely",
)

# Connectives that signal mixed sentiment
CONTRAST_WORDS = (
    "but", "however", "though", "yet", "although", "despite", "nevertheless",
    "nonetheless", "whereas", "while",
)

# Negation handling
NEGATORS = frozenset(
    [
        "not", "no", "never", "hardly", "barely", "without", "none", "nothing",
        "nobody", "nowhere",
    ]
)
NEGATION_WINDOW = 3
NEGATION_DAMPING = 0.9
SENTIMENT_POLARITY_THRESHOLD = 0.5

# Word -> sentiment weight for negation-aware scoring
SENTIMENT_LEXICON: dict[str, float] = {
    "growth": 0.7, "success": 0.8, "achievement": 0.9, "profit": 0.6,
    "revenue": 0.6, "launch": 0.7, "expand": 0.6, "opportunity": 0.7,
    "milestone": 0.8, "progress": 0.6, "improvement": 0.6, "win": 0.8,
    "excited": 0.8, "confident": 0.7, "optimistic": 0.7, "accomplished": 0.9,
    "motivated": 0.7, "inspired": 0.8, "pleased": 0.6, "satisfied": 0.6,
    "challenge": -0.5, "problem": -0.7, "issue": -0.6, "concern": -0.5,
    "risk": -0.5, "loss": -0.8, "decline": -0.6, "failure": -0.9,
    "obstacle": -0.6, "difficulty": -0.6, "setback": -0.7, "crisis": -0.9,
    "frustrated": -0.7, "stressed": -0.8, "worried": -0.7, "overwhelmed": -0.8,
    "disappointed": -0.7, "uncertain": -0.5, "anxious": -0.7, "concerned": -0.5,
    "planning": 0.1, "strategy": 0.1,
}

# Conjunctions that mark a multi-clause sentence
COMPLEX_CONJUNCTIONS = (
    "because", "since", "although", "while", "whereas", "if", "unless", "when",
    "where",
)
LONG_SENTENCE_WORDS = 15

# Mood vocabulary -> polarity
MOOD_POLARITIES: dict[str, str] = {
    # Positive
    "excited": "Positive",
    "confident": "Positive",
    "proud": "Positive",
    "optimistic": "Positive",
    "grateful": "Positive",
    "relieved": "Positive",
    "accomplished": "Positive",
    "energized": "Positive",
    "motivated": "Positive",
    "inspired": "Positive",
    "enthusiastic": "Positive",
    "hopeful": "Positive",
    "satisfied": "Positive",
    "pleased": "Positive",
    "delighted": "Positive",
    "thrilled": "Positive",
    "joyful": "Positive",
    "elated": "Positive",
    "amazed": "Positive",
    "enlightened": "Positive",
    # Negative
    "stressed": "Negative",
    "worried": "Negative",
    "overwhelmed": "Negative",
    "frustrated": "Negative",
    "uncertain": "Negative",
    "guilty": "Negative",
    "anxious": "Negative",
    "disappointed": "Negative",
    "discouraged": "Negative",
    "exhausted": "Negative",
    "defeated": "Negative",
    "concerned": "Negative",
    "troubled": "Negative",
    "upset": "Negative",
    "angry": "Negative",
    "annoyed": "Negative",
    "irritated": "Negative",
    "sad": "Negative",
    "devastated": "Negative",
    "shocked": "Negative",
    # Neutral
    "reflective": "Neutral",
    "analytical": "Neutral",
    "thoughtful": "Neutral",
    "determined": "Neutral",
    "contemplative": "Neutral",
    "focused": "Neutral",
    "strategic": "Neutral",
    "methodical": "Neutral",
    "systematic": "Neutral",
    "organized": "Neutral",
    "practical": "Neutral",
    "realistic": "Neutral",
    "calm": "Neutral",
    "steady": "Neutral",
    "balanced": "Neutral",
    "composed": "Neutral",
    "measured": "Neutral",
    "curious": "Neutral",
    "investigative": "Neutral",
    "experimental": "Neutral",
}

DEFAULT_MOOD = "Thoughtful"

# (polarity, energy, category) -> mood label; None matches any value.
# Looked up from most to least specific.
MOOD_BY_SIGNAL: dict[tuple[str, str | None, str | None], str] = {
    ("Positive", "high", "Growth"): "Excited",
    ("Positive", "high", "Achievement"): "Proud",
    ("Positive", "high", None): "Confident",
    ("Positive", "medium", "Achievement"): "Accomplished",
    ("Positive", None, None): "Optimistic",
    ("Negative", "high", None): "Stressed",
    ("Negative", "medium", None): "Frustrated",
    ("Negative", "low", None): "Worried",
    ("Neutral", None, "Planning"): "Focused",
    ("Neutral", None, "Research"): "Analytical",
    ("Neutral", None, None): DEFAULT_MOOD,
}
