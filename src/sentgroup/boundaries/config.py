"""Compiled sentence boundary configuration."""

import re
from dataclasses import dataclass, field, replace
from typing import FrozenSet, Iterable, Optional, Tuple, Union

PatternLike = Union[str, re.Pattern]

DEFAULT_BOUNDARY_PATTERN = r"\.|[!?]+"

DEFAULT_BOUNDARY_FOLLOWERS: FrozenSet[str] = frozenset(
    {")", "]", "\"", "'", "''", "-RRB-", "-RSB-", "-RCB-"}
)

# Newline markers emitted by whitespace and PTB style tokenizers
WHITESPACE_NEWLINE = "\n"
PTB_NEWLINE_TOKEN = "*NL*"
DEFAULT_SENTENCE_BOUNDARIES_TO_DISCARD: FrozenSet[str] = frozenset(
    {WHITESPACE_NEWLINE, PTB_NEWLINE_TOKEN}
)

class BoundaryConfigError(ValueError):
    """Raised when a boundary, discard or region pattern does not compile."""
    pass

def compile_pattern(pattern: PatternLike, flags: int = 0) -> re.Pattern:
    """Compile a pattern once, wrapping regex errors in BoundaryConfigError."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise BoundaryConfigError(f"Expected a regex string, got {type(pattern).__name__}")
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise BoundaryConfigError(f"Invalid pattern {pattern!r}: {e}") from e

def _string_collection(values: Iterable[str], what: str) -> Iterable[str]:
    if isinstance(values, str):
        raise BoundaryConfigError(f"Expected a collection of {what}, got the single string {values!r}")
    return values

def literal_patterns(strings: Iterable[str]) -> Tuple[re.Pattern, ...]:
    """Exact-match patterns for literal separator tokens, in sorted order."""
    strings = _string_collection(strings, "discard tokens")
    return tuple(re.compile(re.escape(s)) for s in sorted(set(strings)))

def html_tag_patterns(tag: str) -> Tuple[re.Pattern, re.Pattern]:
    """
    Case-insensitive patterns for one HTML tag name.

    The first matches ``<p>``, ``</p>`` and ``<br/>`` style tokens, the
    second an opening tag that carries attributes.
    """
    bare = compile_pattern(r"<\s*/?\s*" + tag + r"\s*/?\s*>", re.IGNORECASE)
    with_attributes = compile_pattern(r"<\s*" + tag + r"\s+[^>]+>", re.IGNORECASE)
    return bare, with_attributes

def _matches(pattern: Optional[re.Pattern], text: str) -> bool:
    return pattern is not None and pattern.fullmatch(text) is not None

@dataclass(frozen=True)
class BoundaryConfig:
    """
    Immutable rule set consumed by the sentence segmenter.

    Every check is a whole-token match: ``"..."`` does not match the
    default boundary pattern even though it contains a period.
    """
    boundary_pattern: re.Pattern
    followers: FrozenSet[str] = DEFAULT_BOUNDARY_FOLLOWERS
    discard_patterns: Tuple[re.Pattern, ...] = field(default_factory=tuple)
    region_begin_pattern: Optional[re.Pattern] = None
    region_end_pattern: Optional[re.Pattern] = None
    one_sentence_mode: bool = False
    allow_empty_sentences: bool = False

    def __post_init__(self):
        # Patterns may be given as strings; matching only ever sees compiled ones
        set_field = object.__setattr__
        set_field(self, "boundary_pattern", compile_pattern(self.boundary_pattern))
        set_field(self, "followers", frozenset(_string_collection(self.followers, "followers")))
        set_field(self, "discard_patterns",
                  tuple(compile_pattern(p) for p in _string_collection(self.discard_patterns, "discard patterns")))
        if self.region_begin_pattern is not None:
            set_field(self, "region_begin_pattern", compile_pattern(self.region_begin_pattern))
        if self.region_end_pattern is not None:
            set_field(self, "region_end_pattern", compile_pattern(self.region_end_pattern))

    @classmethod
    def default(cls) -> "BoundaryConfig":
        """English style boundaries: a period or a run of ``!``/``?``."""
        return cls.with_boundary_pattern(DEFAULT_BOUNDARY_PATTERN)

    @classmethod
    def with_boundary_pattern(cls, pattern: PatternLike) -> "BoundaryConfig":
        """Default followers and discard set with a caller supplied boundary regex."""
        return cls.create(pattern, DEFAULT_BOUNDARY_FOLLOWERS, DEFAULT_SENTENCE_BOUNDARIES_TO_DISCARD)

    @classmethod
    def create(cls, pattern: PatternLike, followers: Iterable[str], discard: Iterable[str], *,
               region_begin_pattern: Optional[PatternLike] = None,
               region_end_pattern: Optional[PatternLike] = None,
               one_sentence_mode: bool = False,
               allow_empty_sentences: bool = False) -> "BoundaryConfig":
        """
        Build a fully explicit configuration.

        Args:
            pattern: Regex a whole token must match to end a sentence
            followers: Exact token texts that attach to a just-ended sentence
            discard: Literal separator tokens, dropped and treated as breaks
            region_begin_pattern: Optional regex opening the region to keep
            region_end_pattern: Optional regex closing that region
            one_sentence_mode: Return all tokens as a single sentence
            allow_empty_sentences: Let separators emit empty sentences

        Raises:
            BoundaryConfigError: If any pattern fails to compile
        """
        return cls(
            boundary_pattern=compile_pattern(pattern),
            followers=followers,
            discard_patterns=literal_patterns(discard),
            region_begin_pattern=compile_pattern(region_begin_pattern) if region_begin_pattern is not None else None,
            region_end_pattern=compile_pattern(region_end_pattern) if region_end_pattern is not None else None,
            one_sentence_mode=one_sentence_mode,
            allow_empty_sentences=allow_empty_sentences,
        )

    def add_html_discard_tags(self, tag_names: Iterable[str]) -> "BoundaryConfig":
        """Return a copy that also discards the given HTML tags. Existing entries are not repeated."""
        patterns = list(self.discard_patterns)
        seen = {(p.pattern, p.flags) for p in patterns}
        for tag in _string_collection(tag_names, "tag names"):
            for p in html_tag_patterns(tag):
                if (p.pattern, p.flags) not in seen:
                    seen.add((p.pattern, p.flags))
                    patterns.append(p)
        return replace(self, discard_patterns=tuple(patterns))

    def set_discard(self, strings: Iterable[str]) -> "BoundaryConfig":
        """Return a copy whose discard list is exactly the given literal tokens."""
        return replace(self, discard_patterns=literal_patterns(strings))

    def add_discard_patterns(self, patterns: Iterable[PatternLike]) -> "BoundaryConfig":
        """Return a copy with extra regex discard patterns appended."""
        extra = tuple(compile_pattern(p) for p in _string_collection(patterns, "discard patterns"))
        return replace(self, discard_patterns=self.discard_patterns + extra)

    def with_regions(self, begin: Optional[PatternLike], end: Optional[PatternLike]) -> "BoundaryConfig":
        return replace(
            self,
            region_begin_pattern=compile_pattern(begin) if begin is not None else None,
            region_end_pattern=compile_pattern(end) if end is not None else None,
        )

    def with_one_sentence_mode(self, enabled: bool = True) -> "BoundaryConfig":
        return replace(self, one_sentence_mode=enabled)

    def with_allow_empty_sentences(self, enabled: bool = True) -> "BoundaryConfig":
        return replace(self, allow_empty_sentences=enabled)

    def is_boundary(self, text: str) -> bool:
        return _matches(self.boundary_pattern, text)

    def is_follower(self, text: str) -> bool:
        return text in self.followers

    def is_discard(self, text: str) -> bool:
        return any(p.fullmatch(text) is not None for p in self.discard_patterns)

    def is_region_begin(self, text: str) -> bool:
        return _matches(self.region_begin_pattern, text)

    def is_region_end(self, text: str) -> bool:
        return _matches(self.region_end_pattern, text)

    @property
    def has_regions(self) -> bool:
        return self.region_begin_pattern is not None
