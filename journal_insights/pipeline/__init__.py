"""LangGraph workflow components for journal entry analysis."""

from .state import EntryState
from .workflow import build_workflow, create_initial_state

__all__ = ["EntryState", "build_workflow", "create_initial_state"]
