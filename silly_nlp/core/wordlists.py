"""
Read-only word lists loaded once per process.

The English dictionary comes from the ``english-words`` package. Other lists
are plain text files with one word per line; blank lines and lines starting
with '#' are ignored.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from english_words import get_english_words_set

from silly_nlp.config import settings
from silly_nlp.core.schemas import WordList
from silly_nlp.utils.exceptions import WordListError
from silly_nlp.utils.logger import log_stage_event, setup_logger

logger = setup_logger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
STOP_WORDS_FILE = DATA_DIR / "stop_words.txt"


def load_word_list(path: Path, name: Optional[str] = None) -> WordList:
    """
    Load a word list file.
    
    Args:
        path: Path to a UTF-8 text file with one word per line
        name: List name (default: file stem)
        
    Returns:
        WordList with every non-comment, non-blank line
        
    Raises:
        WordListError: If the file cannot be read
    """
    path = Path(path)
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except OSError as e:
        logger.error(f"Failed to read word list {path}: {str(e)}")
        raise WordListError(f"Cannot read word list: {path}", detail=str(e)) from e
    
    words = frozenset(
        stripped for stripped in (line.strip() for line in lines)
        if stripped and not stripped.startswith("#")
    )
    word_list = WordList(name=name or path.stem, words=words)
    log_stage_event(logger, "wordlist", "loaded", name=word_list.name, size=len(word_list))
    return word_list


@lru_cache(maxsize=None)
def english_words() -> WordList:
    """
    English dictionary used for missing-space repair.
    
    Lowercased Webster's Second International word list shipped with
    ``english-words``, unless settings.english_words_path names a custom list.
    """
    if settings.english_words_path:
        return load_word_list(settings.english_words_path, "english_words")
    
    word_list = WordList(
        name="english_words",
        words=frozenset(get_english_words_set(["web2"], lower=True)),
    )
    log_stage_event(logger, "wordlist", "loaded", name=word_list.name, size=len(word_list))
    return word_list


@lru_cache(maxsize=None)
def stop_words() -> WordList:
    """English stop words."""
    return load_word_list(settings.stop_words_path or STOP_WORDS_FILE, "stop_words")
