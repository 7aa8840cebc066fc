"""Rule-based grouping of an already tokenized stream into sentences."""

from typing import Any, Iterable, List, Optional, Sequence, TypeVar

from ..boundaries.config import BoundaryConfig
from ..core.abc import Logger, Meter
from ..core.types import SegmentationStats
from ..core.util import TokenShapeError, token_annotations, token_text

T = TypeVar("T")


class _Scan:
    """Mutable state of one left-to-right pass. A fresh instance per call."""

    def __init__(self, config: BoundaryConfig):
        self.config = config
        self.sentences: List[List[Any]] = []
        self.current: List[Any] = []
        self.last: Optional[List[Any]] = None
        self.inside_region = False
        self.waiting_for_forced_end = False
        self.stats = SegmentationStats()

    def feed(self, token: Any) -> None:
        config = self.config
        text = token_text(token)
        hints = token_annotations(token)
        self.stats.tokens += 1

        forced_end = False
        in_multi_token_expr = False
        if hints.forced_end is not None:
            forced_end = hints.forced_end
        elif hints.forced_until_end:
            self.waiting_for_forced_end = True
        else:
            in_multi_token_expr = hints.multi_token_span_end is False

        # Nothing is kept until the region opens, including the marker itself
        if config.region_begin_pattern is not None and not self.inside_region:
            if config.is_region_begin(text):
                self.inside_region = True
            self.stats.discarded += 1
            return

        if config.is_follower(text) and self.last is not None and not self.current:
            self.last.append(token)
            self.stats.attached_followers += 1
            return

        new_sentence = False
        if self.waiting_for_forced_end and not forced_end:
            self.current.append(token)
        elif in_multi_token_expr and not forced_end:
            self.current.append(token)
        elif config.is_discard(text):
            self.stats.discarded += 1
            new_sentence = True
        elif config.is_region_end(text):
            self.inside_region = False
            self.stats.discarded += 1
            new_sentence = True
        elif config.is_boundary(text):
            self.current.append(token)
            new_sentence = True
        elif forced_end:
            self.current.append(token)
            self.waiting_for_forced_end = False
            new_sentence = True
        else:
            self.current.append(token)

        if new_sentence and (self.current or config.allow_empty_sentences):
            self.flush()

    def flush(self) -> None:
        self.sentences.append(self.current)
        self.last = self.current
        self.current = []

    def finish(self) -> List[List[Any]]:
        if self.current:
            self.sentences.append(self.current)
            self.current = []
        self.stats.sentences = len(self.sentences)
        return self.sentences


class SentenceSegmenter:
    """
    Groups tokens into sentences with a single pass and no backtracking.

    Tokens may be strings, mappings with a ``"text"`` key, objects with a
    ``text`` attribute or word wrappers with ``word()``. Output sentences
    hold the very same token objects, in input order. Discard tokens and
    region markers never appear in the output.
    """

    def __init__(self, config: Optional[BoundaryConfig] = None, *,
                 logger: Optional[Logger] = None,
                 meter: Optional[Meter] = None):
        """
        Initialize segmenter.

        Args:
            config: Boundary rules (defaults to BoundaryConfig.default())
            logger: Optional structured logger
            meter: Optional metrics collector
        """
        self.config = config if config is not None else BoundaryConfig.default()
        self.log = logger
        self.meter = meter
        self.last_stats: Optional[SegmentationStats] = None

    def segment(self, tokens: Iterable[T]) -> List[List[T]]:
        """
        Split a token sequence into sentences.

        Args:
            tokens: Tokens in document order (not modified)

        Returns:
            List[List[T]]: Sentences, each a list of the input tokens

        Raises:
            TokenShapeError: If a token exposes no text
        """
        tokens = list(tokens)
        if self.config.one_sentence_mode:
            # Bypasses every other rule, forced-end annotations included
            sentences = [tokens] if tokens else []
            stats = SegmentationStats(tokens=len(tokens), sentences=len(sentences))
        else:
            scan = _Scan(self.config)
            for index, token in enumerate(tokens):
                try:
                    scan.feed(token)
                except TokenShapeError as e:
                    if self.log:
                        self.log.error("Invalid token", index=index, error=str(e))
                    raise TokenShapeError(f"Token {index}: {e}") from e
            sentences = scan.finish()
            stats = scan.stats

        self.last_stats = stats
        if self.meter:
            self.meter.observe("sentgroup.tokens", stats.tokens)
            self.meter.inc("sentgroup.sentences", stats.sentences)
        if self.log:
            self.log.info("sentence_split",
                          tokens=stats.tokens,
                          sentences=stats.sentences,
                          discarded=stats.discarded)
        return sentences

    def segment_texts(self, tokens: Sequence[Any]) -> List[List[str]]:
        """Like segment(), but returns token texts instead of token objects."""
        return [[token_text(t) for t in sentence] for sentence in self.segment(tokens)]


def segment(tokens: Iterable[T], config: Optional[BoundaryConfig] = None) -> List[List[T]]:
    """Split tokens into sentences with the given (or default) boundary rules."""
    return SentenceSegmenter(config).segment(tokens)
