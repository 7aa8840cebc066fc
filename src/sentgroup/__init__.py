"""
sentgroup - Sentence grouping for already tokenized text.

Decides only where sentences end: tokenization happens upstream and
parsing downstream. Boundary rules are injected as a BoundaryConfig.
"""

from .boundaries.config import BoundaryConfig, BoundaryConfigError
from .core.types import Token, SegmentationStats
from .core.util import TokenShapeError
from .segmenters.sentence import SentenceSegmenter, segment

__version__ = "0.1.0"

__all__ = [
    "BoundaryConfig",
    "BoundaryConfigError",
    "SegmentationStats",
    "SentenceSegmenter",
    "Token",
    "TokenShapeError",
    "segment",
]
