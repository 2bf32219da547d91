import logging

from ...processing.signal_fusion import SignalFusion
from ...utils.error_handling import create_error_response
from ..state import EntryState

logger = logging.getLogger(__name__)


def fuse_signals(state: EntryState, fusion: SignalFusion) -> dict:
    """Vote between the rule and corpus signals and calibrate confidence."""
    if state.get("error"):
        return {}

    try:
        fused = fusion.score(state["text"], state.get("rule"), state.get("match"))
    except Exception as e:
        logger.exception("Signal fusion failed")
        return create_error_response(e)

    return {"fused": fused}
