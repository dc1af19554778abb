"""
Canonical simplification of noisy human-authored strings.

Subtitles, captions and chat messages differ in quoting, casing, spelled-out
digits, annotations and emoji. ``simplify`` maps all of these surface
variations onto one comparable form.
"""

import unicodedata
from typing import Callable, List, Optional

from silly_nlp.config import settings
from silly_nlp.pipeline.patterns import ALL_EMOJIS
from silly_nlp.pipeline.regex_algebra import globalize, regex, replace

# U+2026 (…), U+2018/U+2019 (‘ ’), U+201C/U+201D (“ ”)
_ELLIPSIS = regex(r"…", "g")
_SINGLE_QUOTES = regex(r"[‘’]", "g")
_DOUBLE_QUOTES = regex(r"[“”]", "g")

_DIGIT_NAMES = [
    ("ten", "10"),
    ("nine", "9"),
    ("eight", "8"),
    ("seven", "7"),
    ("six", "6"),
    ("five", "5"),
    ("four", "4"),
    ("three", "3"),
    ("two", "2"),
    ("one", "1"),
    ("zero", "0"),
]

_COMBINING_MARKS = regex(r"[\u0300-\u036f]", "g")
_WHITESPACE_RUN = regex(r"\s+", "g")


def replace_smart_quotes(text: str) -> str:
    """Replace typographic ellipsis and curly quotes with ASCII equivalents."""
    text = replace(_ELLIPSIS, "...")(text)
    text = replace(_SINGLE_QUOTES, "'")(text)
    return replace(_DOUBLE_QUOTES, '"')(text)


_DIGIT_REWRITES = [
    replace(regex(rf"\b{name}\b", "g"), digit) for name, digit in _DIGIT_NAMES
]


def replace_digit_names(text: str) -> str:
    """Replace the whole words "zero".."ten" with numerals (case-sensitive)."""
    for rewrite in _DIGIT_REWRITES:
        text = rewrite(text)
    return text


def remove_diacritics(text: str) -> str:
    """
    Fold accented Latin letters to their base letter.

    Decomposes to NFD and drops the combining diacritical marks block, which
    leaves letters of other scripts untouched.
    """
    return replace(_COMBINING_MARKS, "")(unicodedata.normalize("NFD", text))


class TextSimplifier:
    """
    Fixed, ordered chain of rewrites producing a canonical comparable string.

    Stages (order matters, each assumes the previous stage ran):
    1. Trim
    2. Smart punctuation -> ASCII
    3. Lowercase
    4. Spelled-out digits -> numerals
    5. Remove [bracketed] annotations
    6. Drop * : ' " ♪
    7. , . ! ? newline - + -> space
    8. Drop <i> and </i> tags
    9. "doctor" -> "dr"
    10. Strip combining diacritics
    11. Emoji and symbol blocks -> space
    12. Collapse whitespace
    13. Trim

    The chain is applied until it reaches a fixed point, so running
    ``simplify`` on its own output changes nothing.
    """

    def __init__(self, remove_all_bracketed: Optional[bool] = None):
        """
        Initialize simplifier.

        Args:
            remove_all_bracketed: Remove every bracketed run rather than only
                the first one (default: settings.remove_all_bracketed)
        """
        if remove_all_bracketed is None:
            remove_all_bracketed = settings.remove_all_bracketed
        self.remove_all_bracketed = remove_all_bracketed

        brackets = regex(r"\[.*?\]", "g" if remove_all_bracketed else "")
        remove_brackets = replace(brackets, "")

        self._stages: List[Callable[[str], str]] = [
            str.strip,
            replace_smart_quotes,
            str.lower,
            replace_digit_names,
            remove_brackets,
            replace(regex(r"[*:'\"♪]", "g"), ""),
            replace(regex(r"[,.!?\n\-+]", "g"), " "),
            replace(regex(r"</?i>", "g"), ""),
            replace(regex(r"\bdoctor\b", "g"), "dr"),
            remove_diacritics,
            replace(globalize(ALL_EMOJIS), " "),
            replace(_WHITESPACE_RUN, " "),
            str.strip,
        ]
        # In first-only mode the bracket stage runs on the first pass only
        self._repeat_stages = [
            stage for stage in self._stages
            if remove_all_bracketed or stage is not remove_brackets
        ]

    def _run_stages(self, text: str, stages: List[Callable[[str], str]]) -> str:
        for stage in stages:
            text = stage(text)
        return text

    def simplify(self, text: str) -> str:
        """
        Simplify text to its canonical form.

        Later stages can expose work for earlier ones ("t*en" -> "ten",
        "[a\\nb]" -> "[a b]"), so the chain is repeated until its output
        stops changing.

        Args:
            text: Raw text

        Returns:
            Canonical text
        """
        simplified = self._run_stages(text, self._stages)
        while simplified != text:
            text, simplified = simplified, self._run_stages(simplified, self._repeat_stages)
        return simplified

    __call__ = simplify


# Default instance
simplifier = TextSimplifier()


def simplify(text: str) -> str:
    """Simplify text with the default simplifier."""
    return simplifier.simplify(text)
