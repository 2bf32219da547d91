import logging

from ...processing.rule_engine import RuleEngine
from ...utils.error_handling import create_error_response
from ..state import EntryState

logger = logging.getLogger(__name__)


def match_rules(state: EntryState, rule_engine: RuleEngine) -> dict:
    """Find the first business rule that fires for the entry."""
    if state.get("error"):
        return {}

    try:
        rule = rule_engine.first_match(state["text"])
    except Exception as e:
        logger.exception("Rule matching failed")
        return create_error_response(e)

    return {"rule": rule}
