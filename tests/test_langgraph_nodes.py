"""Test the LangGraph node factory."""

import pytest

pytest.importorskip("langchain_core")

from sentgroup.adapters.langgraph.nodes import make_segmenter_node
from sentgroup.adapters.langgraph.state_keys import SENTENCES, SENTENCE_STATS
from sentgroup.segmenters.sentence import SentenceSegmenter


class TestSegmenterNode:
    """Test the segmenter node."""

    def test_node_adds_sentences(self, default_config):
        """Test that the node reads tokens and writes sentences."""
        node = make_segmenter_node(SentenceSegmenter(default_config))

        result = node.invoke({"tokens": ["A", ".", "*NL*", "B"]})

        assert result[SENTENCES] == [["A", "."], ["B"]]
        assert result[SENTENCE_STATS]["sentences"] == 2
        assert result[SENTENCE_STATS]["discarded"] == 1

    def test_node_custom_keys(self, default_config):
        """Test custom state keys."""
        node = make_segmenter_node(SentenceSegmenter(default_config),
                                   tokens_key="words", sentences_key="groups")

        result = node.invoke({"words": ["x", "!"]})

        assert result["groups"] == [["x", "!"]]

    def test_node_missing_tokens(self, default_config):
        """Test that a state without tokens yields no sentences."""
        node = make_segmenter_node(SentenceSegmenter(default_config))

        assert node.invoke({})[SENTENCES] == []
