from functools import partial

from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from ..processing.feedback_manager import FeedbackManager
from ..processing.rule_engine import RuleEngine
from ..processing.signal_fusion import SignalFusion
from ..services.corpus_index import CorpusIndex
from .nodes.corpus_matcher import match_corpus
from .nodes.feedback_adjuster import apply_feedback
from .nodes.fusion import fuse_signals
from .nodes.mood_resolver import resolve_mood
from .nodes.rule_matcher import match_rules
from .state import EntryState


def build_workflow(
    rule_engine: RuleEngine,
    corpus_index: CorpusIndex,
    fusion: SignalFusion,
    feedback_manager: FeedbackManager,
) -> CompiledStateGraph:
    """Build and compile the entry analysis workflow.

    The rule and corpus matchers run in parallel and join before fusion.

    Args:
        rule_engine: Evaluates business rules
        corpus_index: Nearest-neighbour lookup over the training corpus
        fusion: Combines both signals into a draft result
        feedback_manager: Applies per-user corrections

    Returns:
        Compiled LangGraph workflow

    """
    workflow = StateGraph(EntryState)

    # Add nodes
    workflow.add_node("match_rules", partial(match_rules, rule_engine=rule_engine))
    workflow.add_node("match_corpus", partial(match_corpus, corpus_index=corpus_index))
    workflow.add_node("fuse", partial(fuse_signals, fusion=fusion))
    workflow.add_node("resolve_mood", partial(resolve_mood, fusion=fusion))
    workflow.add_node(
        "apply_feedback", partial(apply_feedback, feedback_manager=feedback_manager)
    )

    # Fan out to both matchers, then join
    workflow.add_edge(START, "match_rules")
    workflow.add_edge(START, "match_corpus")
    workflow.add_edge(["match_rules", "match_corpus"], "fuse")

    workflow.add_edge("fuse", "resolve_mood")
    workflow.add_edge("resolve_mood", "apply_feedback")
    workflow.add_edge("apply_feedback", END)

    return workflow.compile()


def create_initial_state(text: str, user_id: str | None = None) -> EntryState:
    """Create initial state for entry analysis.

    Args:
        text: Journal entry text
        user_id: User whose corrections should apply, if any

    Returns:
        Initial entry state

    """
    return {
        "text": text,
        "user_id": user_id,
        "rule": None,
        "match": None,
        "fused": None,
        "draft": None,
        "result": None,
        "error": None,
    }
