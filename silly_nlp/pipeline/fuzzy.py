"""
Approximate semantic equality of short texts such as titles.

Both sides are canonicalized (missing-space repair, simplification, dropping
"the") and the longer one is then searched for, with a bounded edit
distance, inside the shorter one.
"""

import math
from typing import List, Optional

from fuzzysearch import find_near_matches

from silly_nlp.config import settings
from silly_nlp.core.schemas import Span
from silly_nlp.pipeline.interfaces import FuzzySearchError, IFuzzySearcher
from silly_nlp.pipeline.regex_algebra import regex, replace
from silly_nlp.pipeline.segmentation import WordOracle, fix_missing_spaces
from silly_nlp.pipeline.simplify import simplify
from silly_nlp.utils.logger import setup_logger

logger = setup_logger(__name__)

_ARTICLE = regex(r"\bthe\b\s*", "gi")


class LevenshteinSearcher(IFuzzySearcher):
    """
    Fuzzy substring search backed by ``fuzzysearch``.

    Implements the IFuzzySearcher interface.
    """

    def search(self, query: str, text: str, max_edit_distance: int) -> List[Span]:
        """
        Find approximate occurrences of query inside text.

        Args:
            query: String to look for (must be non-empty)
            text: String to search in
            max_edit_distance: Maximum Levenshtein distance of a match

        Returns:
            List of Span in order of appearance

        Raises:
            FuzzySearchError: If the search backend fails
        """
        try:
            found = find_near_matches(query, text, max_l_dist=max_edit_distance)
        except Exception as e:
            logger.error(f"Fuzzy search failed: {str(e)}", exc_info=True)
            raise FuzzySearchError(f"Failed to search for {query[:30]!r}", detail=str(e)) from e
        return [Span(start=match.start, end=match.end) for match in found]


# Default searcher
searcher = LevenshteinSearcher()


def fuzzy_search(query: str, text: str, max_edit_distance: int) -> List[Span]:
    """Search with the default searcher."""
    return searcher.search(query, text, max_edit_distance)


def remove_non_semantic_differences(text: str, contains: Optional[WordOracle] = None) -> str:
    """
    Canonicalize text for approximate comparison.

    Lowercase, repair missing spaces, simplify, then drop every "the".
    """
    text = fix_missing_spaces(text.lower(), contains)
    return replace(_ARTICLE, "")(simplify(text)).strip()


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def approximate_semantic_equality(
    x: str,
    y: str,
    fuzzy_searcher: Optional[IFuzzySearcher] = None,
    contains: Optional[WordOracle] = None,
) -> bool:
    """
    Decide whether two strings plausibly denote the same text despite noise.

    The canonical form of the longer original is searched for inside the
    canonical form of the shorter original, allowing an edit distance of
    ``settings.fuzzy_threshold_ratio`` times the searched text's length.
    Which side is searched for depends only on the originals (length, then
    content), so argument order does not matter.

    Args:
        x: First string
        y: Second string
        fuzzy_searcher: Search oracle (default: LevenshteinSearcher)
        contains: Dictionary oracle for missing-space repair

    Returns:
        True if an approximate occurrence exists
    """
    fuzzy_searcher = fuzzy_searcher or searcher
    shorter, longer = sorted((x, y), key=lambda s: (len(s), s))
    query = remove_non_semantic_differences(longer, contains)
    text = remove_non_semantic_differences(shorter, contains)

    if not query:
        return True
    if not text:
        return False

    threshold = _round_half_up(settings.fuzzy_threshold_ratio * len(text))
    spans = fuzzy_searcher.search(query, text, threshold)
    logger.debug(
        f"Approximate equality: query='{query[:30]}' text='{text[:30]}' "
        f"threshold={threshold} matches={len(spans)}"
    )
    return bool(spans)
