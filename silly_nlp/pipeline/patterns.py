"""
Patterns shared across the pipeline.

``\\b`` only understands ASCII word characters, so whole-word matching in
mixed Latin/Hebrew text goes through BOUNDARY instead.
"""

from functools import reduce

from silly_nlp.core.schemas import Pattern
from silly_nlp.pipeline.regex_algebra import (
    alternate,
    concat,
    escape_literal,
    negative_look_behind,
    regex,
)

ALL_EMOJIS = regex(r"(\u00a9|\u00ae|[\u2000-\u3300]|[\U0001F000-\U0001FBFF])")

PUNCTUATION = regex(r"[_@.\-\s:/\[\]?&%$#=*,!()]")

PLURALITY = regex(r"s|ים|ות", "i")

HEBREW_PREPOSITIONAL_LETTERS = reduce(
    alternate,
    [
        concat(negative_look_behind(regex(r"[א-תa-zA-Z]")), escape_literal(letter))
        for letter in "הולב"
    ],
)

BOUNDARY = reduce(
    alternate,
    [
        PUNCTUATION,
        regex(r"^"),
        regex(r"$"),
        HEBREW_PREPOSITIONAL_LETTERS,
        ALL_EMOJIS,
        PLURALITY,
    ],
)


def whole_word(pattern: Pattern) -> Pattern:
    """Surround a pattern with BOUNDARY (or string edges) on both sides."""
    return regex(
        f"(^|{BOUNDARY.source}){pattern.source}($|{BOUNDARY.source})",
        pattern.flags | BOUNDARY.flags,
    )
