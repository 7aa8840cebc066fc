"""LangGraph node factories for sentence grouping."""

from langchain_core.runnables import RunnableLambda
from ...segmenters.sentence import SentenceSegmenter
from .state_keys import TOKENS, SENTENCES, SENTENCE_STATS

def make_segmenter_node(segmenter: SentenceSegmenter,
                        tokens_key: str = TOKENS,
                        sentences_key: str = SENTENCES):
    """
    Create a LangGraph node that groups a token list into sentences.

    Args:
        segmenter: Configured SentenceSegmenter instance
        tokens_key: State key containing the token list
        sentences_key: State key receiving the sentence lists

    Returns:
        RunnableLambda: Node that adds sentences and their stats to state
    """
    def _segment_tokens(state):
        tokens = state.get(tokens_key) or []
        sentences = segmenter.segment(tokens)
        return {
            sentences_key: sentences,
            SENTENCE_STATS: segmenter.last_stats.to_dict(),
        }

    return RunnableLambda(_segment_tokens)
