"""Tests for structural extraction utilities."""

from silly_nlp.pipeline.extraction import (
    capitalized_prefix,
    capitalized_suffix,
    ngrams_of_at_least_n_words,
    paragraph_to_sentences,
    prefixes_with_suffix,
    quoted_texts,
    suffixes_with_prefix,
)
from silly_nlp.pipeline.regex_algebra import regex


APOCALYPSE = (
    "APOCALYPSE NOW Clip - Smell of Napalm in the Morning (1979) Robert Duvall "
    "JoBlo Movie Clips 5.77M subscribers Subscribe Subscribed 1 2 3 4 5 6 7 8 9 0 "
    "1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 1..."
)

SPIDER_MAN = (
    "Uncle Ben : Remember, with great power comes great responsibility (scene) - "
    "Spider-Man (2002) Movie CLIP [1080p HD]TM & © Sony (2002)Fair use.Copyright Discl..."
)


class TestCapitalizedRuns:
    """Test capitalized_prefix() and capitalized_suffix()."""
    
    def test_prefix_title(self):
        """Test extracting a title at the start of a description."""
        text = (
            "Jerry Maguire with a subscription on Peacock, rent on Amazon Prime Video, "
            "Vudu, Apple TV, or buy on Amazon Prime Video, Vudu, Apple TV."
        )
        
        assert capitalized_prefix(text) == "Jerry Maguire"
    
    def test_prefix_keeps_inner_stop_words(self):
        """Test that stop words inside a title are kept."""
        assert capitalized_prefix("The Lord of the Rings is great") == "The Lord of the Rings"
    
    def test_prefix_stops_at_possessive(self):
        """Test that possessives end the run."""
        assert capitalized_prefix("Spielberg's Jaws") == ""
    
    def test_prefix_needs_capitalized_start(self):
        """Test that a stop word cannot start a run."""
        assert capitalized_prefix("the end") == ""
        assert capitalized_prefix("") == ""
    
    def test_prefix_accepts_digits(self):
        """Test that words starting with a digit continue a run."""
        assert capitalized_prefix("2001 A Space Odyssey is long") == "2001 A Space Odyssey"
    
    def test_suffix_title(self):
        """Test extracting a title at the end of a description."""
        text = (
            "Uncle Ben : Remember, with great power comes great responsibility "
            "(scene) - Spider-Man"
        )
        
        assert capitalized_suffix(text) == "Spider-Man"
    
    def test_suffix_stops_at_lowercase_word(self):
        """Test that the run ends at the last lowercase word."""
        assert capitalized_suffix("watch it on Amazon Prime Video") == "Amazon Prime Video"
        assert capitalized_suffix("nothing here") == ""


class TestQuotedTexts:
    """Test quoted_texts()."""
    
    def test_all_quotes_in_order(self):
        """Test that every quoted substring is returned."""
        text = 'the movie "the matrix" is pretty good i remember the quote "i know kung fu"'
        
        assert quoted_texts(text) == ["the matrix", "i know kung fu"]
    
    def test_no_quotes(self):
        """Test text without quotes."""
        assert quoted_texts("nothing quoted") == []


class TestMarkers:
    """Test prefixes_with_suffix() and suffixes_with_prefix()."""
    
    def test_no_marker(self):
        """Test that no match gives no prefixes."""
        assert prefixes_with_suffix(regex(r"\s+clip", "gi"), "hello") == []
    
    def test_prefix_before_every_marker(self):
        """Test one prefix per marker occurrence."""
        assert prefixes_with_suffix(regex(r"\s+clip", "gi"), APOCALYPSE) == [
            "APOCALYPSE NOW",
            "APOCALYPSE NOW Clip - Smell of Napalm in the Morning (1979) Robert Duvall JoBlo Movie",
        ]
    
    def test_prefix_before_year(self):
        """Test a year marker."""
        assert prefixes_with_suffix(regex(r"\s+\(\d\d\d\d\)", "gi"), SPIDER_MAN) == [
            "Uncle Ben : Remember, with great power comes great responsibility (scene) - Spider-Man",
            "Uncle Ben : Remember, with great power comes great responsibility (scene) - "
            "Spider-Man (2002) Movie CLIP [1080p HD]TM & © Sony",
        ]
    
    def test_marker_without_global_flag(self):
        """Test that every occurrence is used even without the g flag."""
        assert prefixes_with_suffix(regex("x"), "axbx") == ["a", "axb"]
    
    def test_suffix_after_marker(self):
        """Test the text following a leading marker."""
        assert suffixes_with_prefix(regex(r"from\s+", "gi"), "from the matrix") == ["the matrix"]


class TestNgrams:
    """Test ngrams_of_at_least_n_words()."""
    
    def test_order(self):
        """Test that spans are grouped by start word, shortest first."""
        assert ngrams_of_at_least_n_words(2)("hello this is dog") == [
            "hello this",
            "hello this is",
            "hello this is dog",
            "this is",
            "this is dog",
            "is dog",
        ]
    
    def test_too_few_words(self):
        """Test that short inputs give no spans."""
        assert ngrams_of_at_least_n_words(3)("a b") == []


class TestParagraphToSentences:
    """Test paragraph_to_sentences()."""
    
    def test_split_on_period(self):
        """Test splitting on period and whitespace."""
        assert paragraph_to_sentences("One. Two. Three") == ["One", "Two", "Three"]
