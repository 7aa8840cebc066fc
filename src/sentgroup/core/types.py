"""Data types shared by the boundary configuration and the segmenter."""

from dataclasses import dataclass, asdict
from typing import List, Optional, Dict, Any, TypeVar

T = TypeVar("T")

# A sentence is a plain list so the segmenter can still append followers
# to it after it has been emitted.
Sentence = List[T]

@dataclass
class Token:
    """Reference token type. Any object with a ``text`` attribute works as well."""
    text: str
    forced_end: Optional[bool] = None            # True: must end a sentence
    forced_until_end: Optional[bool] = None      # True: no breaks until a forced end
    multi_token_span_end: Optional[bool] = None  # False: inside a multi-token span

    def __str__(self) -> str:
        return self.text

@dataclass(frozen=True)
class TokenAnnotations:
    """Boundary hints read from a single token."""
    forced_end: Optional[bool] = None
    forced_until_end: Optional[bool] = None
    multi_token_span_end: Optional[bool] = None

@dataclass
class SegmentationStats:
    """Counts collected during one segmentation call."""
    tokens: int = 0
    sentences: int = 0
    discarded: int = 0              # discard tokens, region markers, out-of-region tokens
    attached_followers: int = 0

    @property
    def kept(self) -> int:
        """Number of tokens that ended up in some sentence."""
        return self.tokens - self.discarded

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["kept"] = self.kept
        return data
