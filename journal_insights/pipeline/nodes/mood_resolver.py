import logging

from ...processing.signal_fusion import SignalFusion
from ...utils.error_handling import create_error_response
from ..state import EntryState

logger = logging.getLogger(__name__)


def resolve_mood(state: EntryState, fusion: SignalFusion) -> dict:
    """Attach energy, mood and polarity to the fused category.

    When neither matcher produced a signal this yields the no-pattern
    fallback result.
    """
    if state.get("error"):
        return {}

    try:
        draft = fusion.assemble(
            state["text"], state.get("fused"), state.get("rule"), state.get("match")
        )
    except Exception as e:
        logger.exception("Mood resolution failed")
        return create_error_response(e)

    return {"draft": draft}
