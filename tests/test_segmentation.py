"""Tests for missing-space repair."""

from silly_nlp.pipeline.segmentation import fix_missing_space, fix_missing_spaces


WORDS = {"the", "seven", "cat", "dog", "a", "bcd", "ab", "cd", "s"}


def contains(word: str) -> bool:
    return word in WORDS


class TestFixMissingSpace:
    """Test fix_missing_space()."""
    
    def test_splits_concatenated_words(self):
        """Test that two fused dictionary words are separated."""
        assert fix_missing_space("theseven", contains) == "the seven"
        assert fix_missing_space("catdog", contains) == "cat dog"
    
    def test_dictionary_word_unchanged(self):
        """Test that known words are left alone."""
        assert fix_missing_space("cat", contains) == "cat"
    
    def test_unknown_word_unchanged(self):
        """Test that unsplittable words are left alone."""
        assert fix_missing_space("xyzzy", contains) == "xyzzy"
    
    def test_first_split_wins(self):
        """Test that the leftmost valid split point is used."""
        assert fix_missing_space("abcd", contains) == "a bcd"
    
    def test_last_character_split(self):
        """Test that the final split point is considered."""
        assert fix_missing_space("cats", contains) == "cat s"
    
    def test_empty_word(self):
        """Test that an empty token is returned as is."""
        assert fix_missing_space("", contains) == ""
    
    def test_default_dictionary(self):
        """Test the default English dictionary."""
        assert fix_missing_space("theseven") == "the seven"
        assert fix_missing_space("matrix") == "matrix"


class TestFixMissingSpaces:
    """Test fix_missing_spaces()."""
    
    def test_every_token_repaired(self):
        """Test that each token is repaired and joined with single spaces."""
        assert fix_missing_spaces("theseven  catdog dwarfs", contains) == "the seven cat dog dwarfs"
    
    def test_fused_title_words(self):
        """Test repairing a real title with the default dictionary."""
        assert fix_missing_spaces("thematrix snowwhite") == "the matrix snow white"
