"""
Oracle interface definitions.

This module defines abstract interfaces for the external collaborators the
text pipeline consumes as black boxes: fuzzy substring search, phone number
parsing and URL scanning.
"""

from abc import ABC, abstractmethod
from typing import List

from silly_nlp.core.schemas import PhoneParseResult, Span
from silly_nlp.utils.exceptions import SillyNlpError


class IFuzzySearcher(ABC):
    """Interface for bounded approximate substring search."""

    @abstractmethod
    def search(self, query: str, text: str, max_edit_distance: int) -> List[Span]:
        """
        Find approximate occurrences of query inside text.

        Args:
            query: String to look for
            text: String to search in
            max_edit_distance: Maximum Levenshtein distance of a match

        Returns:
            List of Span, empty when nothing is close enough

        Raises:
            FuzzySearchError: If the search backend fails
        """
        pass


class IPhoneParser(ABC):
    """Interface for phone number validation."""

    @abstractmethod
    def parse(self, line: str, country: str) -> PhoneParseResult:
        """
        Parse one line as a phone number of the given country.

        Args:
            line: Candidate text
            country: ISO 3166-1 alpha-2 region code

        Returns:
            PhoneParseResult; unparseable input is an invalid result

        Raises:
            PhoneParserError: If the parsing backend fails unexpectedly
        """
        pass


class IUrlScanner(ABC):
    """Interface for URL extraction."""

    @abstractmethod
    def extract(self, text: str) -> List[str]:
        """
        Extract URL-like substrings.

        Args:
            text: Free text

        Returns:
            URLs in order of appearance
        """
        pass


# Exception classes for oracle errors

class PipelineError(SillyNlpError):
    """Base exception for pipeline errors."""
    pass


class FuzzySearchError(PipelineError):
    """Raised when fuzzy search fails."""
    pass


class PhoneParserError(PipelineError):
    """Raised when phone parsing fails."""
    pass


class UrlScannerError(PipelineError):
    """Raised when URL scanning fails."""
    pass
