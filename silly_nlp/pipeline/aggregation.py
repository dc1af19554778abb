"""
Reducers over collections of strings bucketed by an equivalence function.
"""

from collections import Counter
from typing import Callable, Dict, List, Sequence

from silly_nlp.pipeline.regex_algebra import regex, replace

Equivalence = Callable[[str], str]

_FIRST_ARTICLE = regex(r"\bthe\b", "i")
_EDGE_CHARACTERS = " .,-"


def title_equivalence(text: str) -> str:
    """
    Default equivalence for titles.

    Lowercase, drop the first "the", strip spaces, periods, commas and
    hyphens from both ends.
    """
    return replace(_FIRST_ARTICLE, "")(text.lower()).strip(_EDGE_CHARACTERS)


def _count_by(equivalence: Equivalence, elements: Sequence[str]) -> "Counter[str]":
    return Counter(equivalence(element) for element in elements)


def majority(equivalence: Equivalence) -> Callable[[Sequence[str]], str]:
    """
    Make a reducer returning an element of the most common bucket.

    The representative of a bucket is the first element observed in it.
    Ties go to the bucket that was seen first; an empty input gives "".
    """
    def reduce_elements(elements: Sequence[str]) -> str:
        counts: Dict[str, int] = {}
        first_seen: Dict[str, str] = {}
        for element in elements:
            key = equivalence(element)
            first_seen.setdefault(key, element)
            counts[key] = counts.get(key, 0) + 1
        if not counts:
            return ""
        best_key = max(counts, key=lambda key: counts[key])
        return first_seen[best_key]

    return reduce_elements


def appear_more_than(n: int, equivalence: Equivalence) -> Callable[[Sequence[str]], List[str]]:
    """Make a reducer returning the sorted bucket keys seen more than n times."""
    def reduce_elements(elements: Sequence[str]) -> List[str]:
        counts = _count_by(equivalence, elements)
        return sorted(key for key, count in counts.items() if count > n)

    return reduce_elements


def top_by_count(n: int, equivalence: Equivalence) -> Callable[[Sequence[str]], List[str]]:
    """
    Make a reducer returning the sorted bucket keys with the n smallest counts.

    Counts are sorted ascending and the first n of them (duplicates included)
    are kept; every key whose count is one of those values is returned. This
    selects the least frequent buckets and can return more than n keys.
    """
    def reduce_elements(elements: Sequence[str]) -> List[str]:
        counts = _count_by(equivalence, elements)
        kept_counts = set(sorted(counts.values())[:n])
        return sorted(key for key, count in counts.items() if count in kept_counts)

    return reduce_elements
