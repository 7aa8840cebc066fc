"""Accessors for the text and annotations of heterogeneous tokens."""

from collections.abc import Mapping
from typing import Any, Optional

from .abc import TokenLike
from .types import TokenAnnotations

ANNOTATION_KEYS = ("forced_end", "forced_until_end", "multi_token_span_end")

class TokenShapeError(TypeError):
    """Raised when a token does not expose any text."""
    pass

def token_text(token: Any) -> str:
    """
    Extract the surface form of a token.

    Accepts plain strings, mappings with a ``"text"`` key, objects with a
    string ``text`` attribute and word wrappers exposing ``word()``.

    Raises:
        TokenShapeError: If no text can be extracted
    """
    if isinstance(token, str):
        return token
    if isinstance(token, Mapping):
        text = token.get("text")
        if isinstance(text, str):
            return text
        raise TokenShapeError(f"Token mapping has no string 'text' entry: {token!r}")

    if isinstance(token, TokenLike) and isinstance(token.text, str):
        return token.text

    word = getattr(token, "word", None)
    if callable(word):
        text = word()
        if isinstance(text, str):
            return text

    raise TokenShapeError(f"Expected a string, a mapping or a word object, got {type(token).__name__}")

def _flag(value: Any) -> Optional[bool]:
    return None if value is None else bool(value)

def token_annotations(token: Any) -> TokenAnnotations:
    """Read the optional boundary hints of a token. Strings never carry any."""
    if isinstance(token, str):
        return TokenAnnotations()
    if isinstance(token, Mapping):
        values = [token.get(key) for key in ANNOTATION_KEYS]
    else:
        values = [getattr(token, key, None) for key in ANNOTATION_KEYS]
    return TokenAnnotations(*(_flag(v) for v in values))
