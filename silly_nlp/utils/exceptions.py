"""Custom exception classes."""

from typing import Optional


class SillyNlpError(Exception):
    """Base exception for all library errors."""
    
    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        super().__init__(self.message)


class InvalidPatternError(SillyNlpError):
    """Raised when a pattern source fails to compile."""
    pass


class WordListError(SillyNlpError):
    """Raised when a word list file cannot be loaded."""
    pass
