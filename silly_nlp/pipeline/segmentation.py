"""
Repair of accidentally concatenated words ("theseven" -> "the seven").

First-fit heuristic over a dictionary oracle: no scoring and no
backtracking across words.
"""

from typing import Callable, Optional

from silly_nlp.core.wordlists import english_words

WordOracle = Callable[[str], bool]


def _default_oracle() -> WordOracle:
    return english_words().contains


def fix_missing_space(word: str, contains: Optional[WordOracle] = None) -> str:
    """
    Split a single token into two dictionary words if it is not one already.
    
    Split points are tried left to right and the first one whose halves are
    both dictionary words wins.
    
    Args:
        word: Token without whitespace
        contains: Dictionary membership oracle (default: bundled English words)
        
    Returns:
        The word, or its two halves joined by a single space
    """
    contains = contains or _default_oracle()
    if contains(word):
        return word
    for index in range(1, len(word)):
        if contains(word[:index]) and contains(word[index:]):
            return f"{word[:index]} {word[index:]}"
    return word


def fix_missing_spaces(text: str, contains: Optional[WordOracle] = None) -> str:
    """Apply fix_missing_space to every whitespace-delimited token."""
    contains = contains or _default_oracle()
    return " ".join(fix_missing_space(token, contains) for token in text.split())
