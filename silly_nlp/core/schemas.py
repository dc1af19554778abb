"""Canonical value types shared by the text pipeline."""

import re
from functools import lru_cache
from typing import FrozenSet, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from silly_nlp.utils.exceptions import InvalidPatternError


# ============================================================================
# Patterns
# ============================================================================

# Mode flag -> compile flag. "g" only changes how a pattern is applied
# (find-all / replace-all), so it has no compile-time counterpart.
FLAG_TO_RE = {
    "g": 0,
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "u": re.UNICODE,
    "a": re.ASCII,
}


@lru_cache(maxsize=1024)
def _compile(source: str, flags: str) -> "re.Pattern[str]":
    compile_flags = 0
    for flag in flags:
        compile_flags |= FLAG_TO_RE[flag]
    try:
        return re.compile(source, compile_flags)
    except re.error as e:
        raise InvalidPatternError(f"Invalid pattern source: {source!r}", detail=str(e)) from e


class Pattern(BaseModel):
    """
    Immutable regular expression value: a source string plus a set of mode flags.
    
    Flags are stored as a set so composition can never duplicate them;
    ``flag_string`` gives the deterministic sorted rendering.
    The source is compiled on construction, so invalid syntax surfaces
    immediately as InvalidPatternError.
    """
    model_config = ConfigDict(frozen=True)
    
    source: str = Field(..., description="Regular expression source")
    flags: FrozenSet[str] = Field(default_factory=frozenset, description="Mode flags")
    
    @field_validator("flags", mode="before")
    @classmethod
    def split_flag_string(cls, v):
        """Accept flags as a string such as "gi"."""
        if isinstance(v, str):
            return frozenset(v)
        return v
    
    @field_validator("flags")
    @classmethod
    def validate_flags(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        """Reject flags the host engine does not understand."""
        unknown = sorted(flag for flag in v if flag not in FLAG_TO_RE)
        if unknown:
            raise ValueError(f"Unsupported pattern flags: {''.join(unknown)}")
        return v
    
    def model_post_init(self, __context) -> None:
        self.compiled()
    
    @property
    def flag_string(self) -> str:
        return "".join(sorted(self.flags))
    
    @property
    def is_global(self) -> bool:
        return "g" in self.flags
    
    def compiled(self) -> "re.Pattern[str]":
        """Return the compiled matcher (cached per source and flags)."""
        return _compile(self.source, self.flag_string)


class Span(BaseModel):
    """
    Half-open [start, end) offset range of one match inside a string.
    """
    model_config = ConfigDict(frozen=True)
    
    start: int = Field(..., ge=0, description="Start offset (inclusive)")
    end: int = Field(..., ge=0, description="End offset (exclusive)")
    
    @field_validator("end")
    @classmethod
    def validate_offsets(cls, v: int, info) -> int:
        """Ensure end offset >= start offset."""
        if "start" in info.data and v < info.data["start"]:
            raise ValueError("end must be >= start")
        return v


# ============================================================================
# Keyword triggering
# ============================================================================

class KeywordRule(BaseModel):
    """
    Keywords that classify text into a category.
    
    Attributes:
        keywords: At least one must whole-word-match for the rule to fire
        anti_keywords: None may match for the rule to fire
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")
    
    keywords: List[str] = Field(default_factory=list, description="Required keywords")
    anti_keywords: List[str] = Field(
        default_factory=list,
        alias="antiKeywords",
        description="Disqualifying keywords",
    )


# ============================================================================
# Oracle results
# ============================================================================

class PhoneParseResult(BaseModel):
    """Outcome of parsing one line as a phone number."""
    model_config = ConfigDict(frozen=True)
    
    is_valid: bool = Field(..., description="Whether the line is a valid number")
    canonical: str = Field(default="", description="E.164 number without leading '+'")


class WordList(BaseModel):
    """
    Read-only set of words used as a membership oracle.
    """
    model_config = ConfigDict(frozen=True)
    
    name: str = Field(..., description="Human readable list name")
    words: FrozenSet[str] = Field(default_factory=frozenset, description="Member words")
    
    def contains(self, word: str) -> bool:
        """Exact, case-sensitive membership test."""
        return word in self.words
    
    def __contains__(self, word: object) -> bool:
        return word in self.words
    
    def __len__(self) -> int:
        return len(self.words)
