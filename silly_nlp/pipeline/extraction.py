"""
Surface-level extraction of titles, quotes and word spans from free text.
"""

from typing import Callable, List, Sequence

from silly_nlp.core.schemas import Pattern
from silly_nlp.core.wordlists import stop_words
from silly_nlp.pipeline.regex_algebra import find_all_spans, regex, split
from silly_nlp.pipeline.simplify import simplify

# Words allowed inside a capitalized title ("Lord of the Rings")
TITLE_STOP_WORDS = ["the", "with", "of", "and", "in"]

_WORD_SEPARATOR = regex(r"\s+")
_SENTENCE_END = regex(r"\.\s")
_QUOTED = regex(r'"([^"]*?)"')
_CAPITALIZED_START = regex(r"[\dA-Z]")


def sentence_to_words(text: str) -> List[str]:
    return split(_WORD_SEPARATOR, text)


def paragraph_to_sentences(text: str) -> List[str]:
    """Split a paragraph on a period followed by whitespace."""
    return split(_SENTENCE_END, text)


def is_stop_word(word: str) -> bool:
    """Check whether the simplified word is an English stop word."""
    return simplify(word) in stop_words()


def _starts_capitalized(word: str) -> bool:
    return bool(word) and _CAPITALIZED_START.compiled().match(word[0]) is not None


def capitalized_sequence(
    stop_words_left: Sequence[str],
    stop_words_right: Sequence[str],
) -> Callable[[List[str]], List[str]]:
    """
    Make a function that takes the leading run of title-like words.

    A word continues the run if it starts with a digit or capital letter and
    is not a possessive, or if it is one of the stop words and the run has
    already started. Stop words are then trimmed from the front (right-side
    set) and the back (left-side set) of the run.

    Args:
        stop_words_left: Stop words that may not end a run
        stop_words_right: Stop words that may not start a run

    Returns:
        Function from a word list to the trimmed run
    """
    all_stop_words = list(stop_words_left) + list(stop_words_right)

    def take_sequence(words: List[str]) -> List[str]:
        sequence: List[str] = []
        for word in words:
            continues_with_stop_word = (
                '"' not in word and bool(sequence) and word in all_stop_words
            )
            if continues_with_stop_word or (
                _starts_capitalized(word) and not word.endswith("'s")
            ):
                sequence.append(word)
            else:
                break

        start = 0
        while start < len(sequence) and simplify(sequence[start]) in stop_words_right:
            start += 1
        end = len(sequence)
        while end > start and simplify(sequence[end - 1]) in stop_words_left:
            end -= 1
        return sequence[start:end]

    return take_sequence


_prefix_sequence = capitalized_sequence(TITLE_STOP_WORDS, [])
_suffix_sequence = capitalized_sequence([], TITLE_STOP_WORDS)


def capitalized_prefix(text: str) -> str:
    """
    Extract the capitalized run of words that starts the text.

    Example:
        >>> capitalized_prefix("Jerry Maguire with a subscription on Peacock")
        'Jerry Maguire'
    """
    return " ".join(_prefix_sequence(sentence_to_words(text)))


def capitalized_suffix(text: str) -> str:
    """Extract the capitalized run of words that ends the text."""
    words = sentence_to_words(text)
    return " ".join(reversed(_suffix_sequence(list(reversed(words)))))


def quoted_texts(text: str) -> List[str]:
    """Return the contents of every double-quoted substring, left to right."""
    return _QUOTED.compiled().findall(text)


def prefixes_with_suffix(pattern: Pattern, text: str) -> List[str]:
    """For every match of pattern, the text before the match."""
    return [text[:span.start] for span in find_all_spans(pattern, text)]


def suffixes_with_prefix(pattern: Pattern, text: str) -> List[str]:
    """For every match of pattern, the text after the match."""
    return [text[span.end:] for span in find_all_spans(pattern, text)]


def ngrams_of_at_least_n_words(n: int) -> Callable[[str], List[str]]:
    """
    Make a function listing every contiguous span of at least n words.

    Spans are ordered by start word, then by length. The number of spans is
    quadratic in the word count.
    """
    def ngrams(text: str) -> List[str]:
        words = text.split(" ")
        return [
            " ".join(words[i:j])
            for i in range(len(words) - n + 1)
            for j in range(i + n, len(words) + 1)
        ]

    return ngrams
