import logging

from ...exceptions import DatasetValidationError
from ...services.corpus_index import CorpusIndex
from ...utils.error_handling import create_error_response
from ..state import EntryState

logger = logging.getLogger(__name__)


def match_corpus(state: EntryState, corpus_index: CorpusIndex) -> dict:
    """Look up the nearest labeled example for the entry.

    An invalid corpus is fatal and propagates; anything else becomes an error
    entry in the state.
    """
    if state.get("error"):
        return {}

    try:
        match = corpus_index.best_match(state["text"])
    except DatasetValidationError:
        raise
    except Exception as e:
        logger.exception("Corpus lookup failed")
        return create_error_response(e)

    if match is not None:
        logger.debug(f"Nearest example {match.example.id} ({match.similarity:.2f})")
    return {"match": match}
