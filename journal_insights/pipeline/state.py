from typing import Annotated, TypedDict

from ..models.analysis import AnalysisResult
from ..models.rule import Rule
from ..processing.signal_fusion import FusionScore
from ..services.corpus_index import CorpusMatch


def keep_first_error(current: str | None, new: str | None) -> str | None:
    """Reducer letting the parallel matchers both report failures."""
    return current or new


class EntryState(TypedDict):
    """State that flows through the LangGraph workflow."""

    # Input fields
    text: str
    user_id: str | None

    # Parallel matcher outputs
    rule: Rule | None
    match: CorpusMatch | None

    # Fusion and labeling
    fused: FusionScore | None
    draft: AnalysisResult | None

    # Final result after per-user learning
    result: AnalysisResult | None

    # Workflow control
    error: Annotated[str | None, keep_first_error]
