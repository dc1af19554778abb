"""
Combinators for building regular expressions out of smaller ones.

Every combinator takes Pattern values and returns a new Pattern; operands are
never modified. Composing two patterns unions their flag sets.
"""

import re
from typing import Callable, Iterable, List

from silly_nlp.core.schemas import Pattern, Span


def regex(source: str, flags: Iterable[str] = "") -> Pattern:
    """
    Build a pattern from a source string.

    Args:
        source: Regular expression source
        flags: Mode flags, e.g. "gi"

    Returns:
        Pattern value

    Raises:
        InvalidPatternError: If the source does not compile
    """
    return Pattern(source=source, flags=frozenset(flags))


def _union_flags(x: Pattern, y: Pattern) -> frozenset:
    return x.flags | y.flags


def bracket_if_needed(source: str) -> str:
    """Wrap a source in a non-capturing group unless it already looks grouped."""
    if (source.startswith("(") and source.endswith(")")) or (
        source.startswith("[") and source.endswith("]")
    ):
        return source
    return f"(?:{source})"


def concat(x: Pattern, y: Pattern) -> Pattern:
    """Sequence two patterns. Operands with top-level alternation must be grouped first."""
    return regex(x.source + y.source, _union_flags(x, y))


def alternate(x: Pattern, y: Pattern) -> Pattern:
    """Match either pattern."""
    return regex(
        f"(?:{bracket_if_needed(x.source)}|{bracket_if_needed(y.source)})",
        _union_flags(x, y),
    )


def optional(x: Pattern) -> Pattern:
    return regex(f"{bracket_if_needed(x.source)}?", x.flags)


def zero_or_more(x: Pattern) -> Pattern:
    return regex(f"{bracket_if_needed(x.source)}*", x.flags)


def one_or_more(x: Pattern) -> Pattern:
    return regex(f"{bracket_if_needed(x.source)}+", x.flags)


def times(min_count: int, max_count: int, x: Pattern) -> Pattern:
    """Repeat a pattern between min_count and max_count times."""
    return regex(f"{bracket_if_needed(x.source)}{{{min_count},{max_count}}}", x.flags)


def entire_string(x: Pattern) -> Pattern:
    """Anchor a pattern so it must match the whole input."""
    return regex(f"^{x.source}$", x.flags)


def capture_group(x: Pattern) -> Pattern:
    return regex(f"({x.source})", x.flags)


def negative_look_behind(x: Pattern) -> Pattern:
    """Zero-width assertion that x does not end right before the current position."""
    return regex(f"(?<!{x.source})", x.flags)


def add_flag(flag: str) -> Callable[[Pattern], Pattern]:
    """
    Make a transformer that adds one mode flag.

    Adding a flag that is already present returns an equal pattern.
    """
    def transform(x: Pattern) -> Pattern:
        if flag in x.flags:
            return x
        return regex(x.source, x.flags | {flag})

    return transform


case_insensitive = add_flag("i")
globalize = add_flag("g")


def escape_literal(text: str) -> Pattern:
    """Pattern matching the literal text, with every metacharacter escaped."""
    return regex(re.escape(text))


def find_all_spans(pattern: Pattern, text: str) -> List[Span]:
    """
    Locate every non-overlapping match, left to right.

    Find-all semantics apply whether or not the pattern carries the "g" flag.
    After a match the scan resumes at its end; an empty match moves the scan
    forward by one character so the loop always terminates.

    Args:
        pattern: Pattern to search for
        text: Input string

    Returns:
        List of Span in discovery order
    """
    compiled = globalize(pattern).compiled()
    spans: List[Span] = []
    position = 0
    while position <= len(text):
        match = compiled.search(text, position)
        if match is None:
            break
        spans.append(Span(start=match.start(), end=match.end()))
        position = match.end() if match.end() > match.start() else match.end() + 1
    return spans


def matches(pattern: Pattern) -> Callable[[str], bool]:
    """Predicate that is true when the pattern occurs anywhere in its argument."""
    compiled = pattern.compiled()
    return lambda text: compiled.search(text) is not None


def replace(pattern: Pattern, replacement: str) -> Callable[[str], str]:
    """
    Make a rewrite function.

    Replaces only the first match unless the pattern carries the "g" flag.
    The replacement is inserted literally.
    """
    compiled = pattern.compiled()
    count = 0 if pattern.is_global else 1
    return lambda text: compiled.sub(lambda _: replacement, text, count=count)


def split(pattern: Pattern, text: str) -> List[str]:
    """Split text on every match of the pattern."""
    return pattern.compiled().split(text)
