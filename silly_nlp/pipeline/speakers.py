"""
Removal of speaker labels ("Han Solo :") from dialogue transcripts.
"""

from functools import reduce
from typing import List

from silly_nlp.pipeline.patterns import BOUNDARY
from silly_nlp.pipeline.regex_algebra import (
    alternate,
    case_insensitive,
    concat,
    entire_string,
    matches,
    optional,
    regex,
    replace,
    split,
    times,
)

NAME_PREFIX = reduce(
    alternate,
    [case_insensitive(regex(rf"{title}\.?")) for title in ["ms", "mrs", "mr", "dr", "prof"]],
)

NAME_SUFFIX = reduce(
    alternate,
    [case_insensitive(regex(rf"{title}\.?")) for title in ["sr", "jr"]],
)

# The case-insensitive title flags carry over to the whole name pattern
PERSON_NAME = reduce(
    concat,
    [
        optional(concat(NAME_PREFIX, regex(r"\s"))),
        times(0, 4, regex(r"'?[A-Z][\w-]*\.?'?\s")),
        alternate(regex(r"[\w-]+"), concat(NAME_SUFFIX, regex(r"\s"))),
    ],
)

HYPHEN = regex(r"[―-]")

SPEAKER = reduce(concat, [optional(HYPHEN), PERSON_NAME, regex(r"\s?:"), BOUNDARY])

SPEAKER_IN_END = reduce(concat, [HYPHEN, regex(r"\s*"), PERSON_NAME, regex(r"$")])

# Split after , ! . ? : unless the period belongs to "e.g." or "Mr."
SENTENCE_BREAK = regex(r"(?<!\w\.\w.)(?<![A-Z][a-z]\.)(?<=[,!.?:])\s")

_is_speaker = matches(entire_string(SPEAKER))
_remove_speaker_in_end = replace(SPEAKER_IN_END, "")
_collapse_whitespace = replace(regex(r"\s+", "g"), " ")


def split_sentences(text: str) -> List[str]:
    """Split text into sentences (and clauses) on punctuation followed by whitespace."""
    return split(SENTENCE_BREAK, text)


def clean_speakers(text: str) -> str:
    """
    Strip speaker labels from a dialogue transcript.

    Sentences that consist only of a speaker label are dropped, the rest are
    rejoined with single spaces, and a dangling attribution at the very end
    ("― Hunter S. Thompson") is removed.

    Args:
        text: Transcript text

    Returns:
        Dialogue without speaker labels
    """
    sentences = [
        sentence for sentence in split_sentences(text)
        if not _is_speaker(sentence.strip())
    ]
    cleaned = _collapse_whitespace(" ".join(sentences))
    return _remove_speaker_in_end(cleaned).strip()
