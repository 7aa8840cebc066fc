"""Pydantic schema for boundary rules stored as YAML."""

import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from .config import (
    BoundaryConfig,
    DEFAULT_BOUNDARY_PATTERN,
    DEFAULT_BOUNDARY_FOLLOWERS,
    DEFAULT_SENTENCE_BOUNDARIES_TO_DISCARD,
)

def _check_regex(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        re.compile(value)
    except re.error as e:
        raise ValueError(f"invalid regular expression {value!r}: {e}")
    return value

class BoundaryRules(BaseModel):
    """Serializable form of a BoundaryConfig: every pattern is kept as a string."""
    model_config = ConfigDict(extra="forbid")  # Strict validation

    version: int = Field(default=1, description="Rules schema version")
    boundary_pattern: str = Field(default=DEFAULT_BOUNDARY_PATTERN,
                                  description="Regex a whole token must match to end a sentence")
    followers: List[str] = Field(default_factory=lambda: sorted(DEFAULT_BOUNDARY_FOLLOWERS),
                                 description="Tokens folded into the sentence that just ended")
    discard: List[str] = Field(default_factory=lambda: sorted(DEFAULT_SENTENCE_BOUNDARIES_TO_DISCARD),
                               description="Literal separator tokens, dropped and treated as breaks")
    discard_patterns: List[str] = Field(default_factory=list,
                                        description="Regex separator tokens, dropped and treated as breaks")
    html_discard_tags: List[str] = Field(default_factory=list,
                                         description="HTML tag names whose tags act as separators")
    region_begin_pattern: Optional[str] = Field(default=None, description="Regex opening the region to keep")
    region_end_pattern: Optional[str] = Field(default=None, description="Regex closing the region")
    one_sentence_mode: bool = False
    allow_empty_sentences: bool = False

    @field_validator("boundary_pattern", "region_begin_pattern", "region_end_pattern")
    @classmethod
    def pattern_compiles(cls, v):
        return _check_regex(v)

    @field_validator("discard_patterns")
    @classmethod
    def patterns_compile(cls, v):
        for pattern in v:
            _check_regex(pattern)
        return v

    @field_validator("html_discard_tags")
    @classmethod
    def tags_are_names(cls, v):
        bad = [t for t in v if not re.fullmatch(r"[A-Za-z][A-Za-z0-9:-]*", t)]
        if bad:
            raise ValueError(f"not HTML tag names: {bad}")
        return v

    def validate_rules(self) -> List[str]:
        """Check rule consistency and return any issues."""
        issues = []

        if not self.boundary_pattern:
            issues.append("Empty boundary_pattern would end a sentence at empty tokens only")

        if self.region_end_pattern is not None and self.region_begin_pattern is None:
            issues.append("region_end_pattern is set without region_begin_pattern")

        boundary = re.compile(self.boundary_pattern)
        boundary_followers = sorted(f for f in self.followers if boundary.fullmatch(f))
        if boundary_followers:
            issues.append(f"Followers that are also boundary tokens: {boundary_followers}")

        duplicates = sorted(set(x for x in self.followers if self.followers.count(x) > 1))
        if duplicates:
            issues.append(f"Duplicate followers: {duplicates}")

        return issues

    def to_config(self) -> BoundaryConfig:
        """Compile these rules into a BoundaryConfig."""
        config = BoundaryConfig.create(
            self.boundary_pattern,
            self.followers,
            self.discard,
            region_begin_pattern=self.region_begin_pattern,
            region_end_pattern=self.region_end_pattern,
            one_sentence_mode=self.one_sentence_mode,
            allow_empty_sentences=self.allow_empty_sentences,
        )
        if self.discard_patterns:
            config = config.add_discard_patterns(self.discard_patterns)
        if self.html_discard_tags:
            config = config.add_html_discard_tags(self.html_discard_tags)
        return config
