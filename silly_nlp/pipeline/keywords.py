"""
Keyword triggering over free text.

Keywords and text are both simplified, and keywords match as whole words
under the multi-script BOUNDARY, so "talk" matches "talks" and the Hebrew
"בדסמ" matches "לבדסמ".
"""

from typing import Callable, Hashable, List, Mapping, Sequence, TypeVar, Union

from silly_nlp.core.schemas import KeywordRule
from silly_nlp.pipeline.patterns import whole_word
from silly_nlp.pipeline.regex_algebra import escape_literal
from silly_nlp.pipeline.simplify import simplify
from silly_nlp.utils.logger import setup_logger

logger = setup_logger(__name__)

T = TypeVar("T", bound=Hashable)


def some_keyword_matches(keywords: Sequence[str]) -> Callable[[str], bool]:
    """
    Make a predicate that is true when any keyword occurs in its argument.

    Args:
        keywords: Keywords, matched literally after simplification;
            keywords that simplify to nothing are ignored

    Returns:
        Predicate over text
    """
    simplified_keywords = [simplify(keyword) for keyword in keywords]
    # An empty keyword would match any text
    patterns = [
        whole_word(escape_literal(keyword)).compiled()
        for keyword in simplified_keywords if keyword
    ]

    def predicate(text: str) -> bool:
        simplified = simplify(text)
        return any(pattern.search(simplified) is not None for pattern in patterns)

    return predicate


def _rule_matcher(rule: KeywordRule) -> Callable[[str], bool]:
    required = some_keyword_matches(rule.keywords)
    forbidden = some_keyword_matches(rule.anti_keywords)
    return lambda text: required(text) and not forbidden(text)


def trigger_by_text(
    rules_by_category: Mapping[T, Union[KeywordRule, Mapping[str, Sequence[str]]]],
) -> Callable[[str], List[T]]:
    """
    Make a classifier mapping text to every category whose rule fires.

    A rule fires when at least one keyword matches and no anti-keyword does.

    Args:
        rules_by_category: Category -> KeywordRule (or a mapping with
            "keywords" and optional "anti_keywords")

    Returns:
        Function from text to matching categories, in input order
    """
    matchers = [
        (category, _rule_matcher(KeywordRule.model_validate(rule)))
        for category, rule in rules_by_category.items()
    ]

    def classify(text: str) -> List[T]:
        categories = [category for category, matcher in matchers if matcher(text)]
        logger.debug(f"Triggered categories {categories} for text prefix='{text[:30]}'")
        return categories

    return classify
