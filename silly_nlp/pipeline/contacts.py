"""
Extraction of contact details: telegram handles, URLs and phone numbers.
"""

from typing import Callable, List, Optional

import phonenumbers
from phonenumbers import NumberParseException, PhoneNumberFormat

from silly_nlp.core.schemas import PhoneParseResult
from silly_nlp.pipeline.interfaces import IPhoneParser, IUrlScanner, PhoneParserError, UrlScannerError
from silly_nlp.pipeline.regex_algebra import alternate, regex, replace
from silly_nlp.utils.logger import setup_logger

logger = setup_logger(__name__)

TELEGRAM_HANDLE = alternate(
    regex(r".*\B@((?=\w{5,32}\b)[a-zA-Z0-9]+(?:_[a-zA-Z0-9]+)*).*"),
    regex(r"t\.me/(\w{4,})"),
)

EMAIL = regex(r"[a-zA-Z0-9_.+\-]+@[a-zA-Z0-9\-]+\.[a-zA-Z0-9\-.]+", "g")

IMAGE_FILENAME = regex(r"\b\S+.(?:jpg|png|jpeg)\b", "g")

URL = regex(
    r"\b(?:https?://|ftp://)?[\w.\-]+\.[a-z]{2,}"
    r"(?:/[\w\-._~:/?#\[\]@!$&'()*+,;=%]*)?\b",
    "gi",
)

_remove_emails = replace(EMAIL, "")
_remove_image_filenames = replace(IMAGE_FILENAME, "")


def telegram_handles_in_text(text: str) -> List[str]:
    """
    Find a telegram handle given as ``@handle`` or ``t.me/handle``.

    Returns:
        The handle as a single-element list, or an empty list
    """
    match = TELEGRAM_HANDLE.compiled().search(text)
    if match is None:
        return []
    handle = match.group(1) or match.group(2)
    return [handle] if handle else []


class RegexUrlScanner(IUrlScanner):
    """
    Regex-based URL extraction.

    Implements the IUrlScanner interface.
    """

    def extract(self, text: str) -> List[str]:
        """
        Extract URL-like substrings.

        Raises:
            UrlScannerError: If scanning fails
        """
        try:
            return [match.group(0) for match in URL.compiled().finditer(text)]
        except Exception as e:
            logger.error(f"URL scanning failed: {str(e)}", exc_info=True)
            raise UrlScannerError("Failed to scan text for URLs", detail=str(e)) from e


# Default URL scanner
url_scanner = RegexUrlScanner()


def urls_in_text(text: str, scanner: Optional[IUrlScanner] = None) -> List[str]:
    """
    Extract URLs, ignoring email addresses and bare image filenames.

    Args:
        text: Free text
        scanner: URL scanner (default: RegexUrlScanner)

    Returns:
        URL-like substrings in order of appearance
    """
    scanner = scanner or url_scanner
    return scanner.extract(_remove_image_filenames(_remove_emails(text)))


class PhonenumbersParser(IPhoneParser):
    """
    Phone number validation backed by ``phonenumbers``.

    Implements the IPhoneParser interface.
    """

    def parse(self, line: str, country: str) -> PhoneParseResult:
        """
        Parse one line as a phone number of the given country.

        Args:
            line: Candidate text
            country: ISO 3166-1 alpha-2 region code

        Returns:
            PhoneParseResult with the E.164 number (without '+') when valid

        Raises:
            PhoneParserError: If the backend fails for reasons other than
                unparseable input
        """
        try:
            number = phonenumbers.parse(line, country.upper())
        except NumberParseException:
            return PhoneParseResult(is_valid=False)
        except Exception as e:
            logger.error(f"Phone parsing failed: {str(e)}", exc_info=True)
            raise PhoneParserError(f"Failed to parse phone line for {country}", detail=str(e)) from e

        if not phonenumbers.is_valid_number(number):
            return PhoneParseResult(is_valid=False)
        canonical = phonenumbers.format_number(number, PhoneNumberFormat.E164)
        return PhoneParseResult(is_valid=True, canonical=canonical.replace("+", "", 1))


# Default phone parser
phone_parser = PhonenumbersParser()


def phones_in_text(country: str, parser: Optional[IPhoneParser] = None) -> Callable[[str], List[str]]:
    """
    Make a function extracting every line that is a valid phone number.

    Args:
        country: ISO 3166-1 alpha-2 region code, e.g. "IL"
        parser: Phone oracle (default: PhonenumbersParser)

    Returns:
        Function from text to canonical numbers without a leading '+'
    """
    parser = parser or phone_parser

    def extract(text: str) -> List[str]:
        results = [parser.parse(line, country) for line in text.split("\n")]
        return [result.canonical for result in results if result.is_valid]

    return extract
