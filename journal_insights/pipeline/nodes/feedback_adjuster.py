import logging

from ...exceptions import AnalysisError
from ...processing.feedback_manager import FeedbackManager
from ...utils.error_handling import create_error_response
from ..state import EntryState

logger = logging.getLogger(__name__)


def apply_feedback(state: EntryState, feedback_manager: FeedbackManager) -> dict:
    """Override the draft with the user's closest past correction, if any."""
    if state.get("error"):
        return {}

    draft = state.get("draft")
    if draft is None:
        return create_error_response(AnalysisError("No draft result to adjust"))

    user_id = state.get("user_id")
    if not user_id:
        return {"result": draft}

    try:
        result = feedback_manager.adjust(state["text"], draft, user_id)
    except Exception as e:
        logger.exception("Applying user feedback failed")
        return create_error_response(e)

    return {"result": result}
