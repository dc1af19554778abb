"""Tests for contact extraction."""

from typing import List

import pytest

from silly_nlp.core.schemas import PhoneParseResult
from silly_nlp.pipeline.contacts import (
    PhonenumbersParser,
    RegexUrlScanner,
    phones_in_text,
    telegram_handles_in_text,
    urls_in_text,
)
from silly_nlp.pipeline.interfaces import IPhoneParser, IUrlScanner, UrlScannerError


class PlusPrefixParser(IPhoneParser):
    """Parser stub accepting lines that start with '+'."""
    
    def __init__(self):
        self.calls = []
    
    def parse(self, line: str, country: str) -> PhoneParseResult:
        self.calls.append((line, country))
        if line.startswith("+"):
            return PhoneParseResult(is_valid=True, canonical=line[1:])
        return PhoneParseResult(is_valid=False)


class EchoScanner(IUrlScanner):
    """Scanner stub returning its input."""
    
    def extract(self, text: str) -> List[str]:
        return [text]


class TestTelegramHandles:
    """Test telegram_handles_in_text()."""
    
    def test_at_handle(self):
        """Test an @handle."""
        assert telegram_handles_in_text("contact @my_handle now") == ["my_handle"]
    
    def test_link_handle(self):
        """Test a t.me link."""
        assert telegram_handles_in_text("join t.me/durov_channel today") == ["durov_channel"]
    
    def test_no_handle(self):
        """Test texts without handles."""
        assert telegram_handles_in_text("no handle here") == []
        assert telegram_handles_in_text("too short @abc") == []
        assert telegram_handles_in_text("write to me@example.com") == []


class TestUrls:
    """Test urls_in_text()."""
    
    def test_extracts_urls(self):
        """Test URL extraction with and without scheme."""
        assert urls_in_text("visit https://example.com/page today") == ["https://example.com/page"]
        assert urls_in_text("see www.example.org/path?x=1 now") == ["www.example.org/path?x=1"]
    
    def test_ignores_emails_and_images(self):
        """Test that emails and image filenames are not URLs."""
        assert urls_in_text("mail foo@bar.com or see photo.jpg") == []
        assert urls_in_text(
            "visit https://example.com/page, mail foo@bar.com, see cat.png"
        ) == ["https://example.com/page"]
    
    def test_custom_scanner(self):
        """Test that the scanner receives the cleaned text."""
        assert urls_in_text("mail foo@bar.com", scanner=EchoScanner()) == ["mail "]
    
    def test_scanner_failure_is_wrapped(self):
        """Test that scanning errors surface as UrlScannerError."""
        with pytest.raises(UrlScannerError) as exc_info:
            RegexUrlScanner().extract(None)
        
        assert exc_info.value.detail


class TestPhones:
    """Test phones_in_text()."""
    
    def test_every_valid_line(self):
        """Test that text is checked line by line."""
        parser = PlusPrefixParser()
        
        found = phones_in_text("IL", parser=parser)("+972501234567\nhello\n+15551234")
        
        assert found == ["972501234567", "15551234"]
        assert [country for _, country in parser.calls] == ["IL", "IL", "IL"]
    
    def test_phonenumbers_backend(self):
        """Test the default backend with well-known numbers."""
        assert phones_in_text("US")("call\n650-253-0000\nbye") == ["16502530000"]
        assert phones_in_text("GB")("020 7031 3000") == ["442070313000"]
    
    def test_invalid_line(self):
        """Test that unparseable text is an invalid result."""
        assert PhonenumbersParser().parse("not a number", "US").is_valid is False
