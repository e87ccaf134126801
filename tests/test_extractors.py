"""Tests for segment extraction strategies and token normalization."""

import pytest
from pydantic import ValidationError

from tokenkit.boundary import create_scanner
from tokenkit.extractor import (
    BoundarySplitExtractor,
    CharacterExtractor,
    PatternExtractExtractor,
    PatternSplitExtractor,
    Token,
    TokenNormalizer,
)


def _texts(tokens):
    return [token.text for token in tokens]


class TestToken:
    def test_valid_token(self):
        token = Token(text="dog", start=4, end=7)
        assert (token.text, token.start, token.end) == ("dog", 4, 7)

    def test_empty_range_rejected(self):
        with pytest.raises(ValidationError):
            Token(text="x", start=3, end=3)

    def test_empty_text_rejected(self):
        with pytest.raises(ValidationError):
            Token(text="", start=0, end=1)

    def test_token_is_frozen(self):
        token = Token(text="dog", start=0, end=3)
        with pytest.raises(ValidationError):
            token.text = "cat"


class TestTokenNormalizer:
    def test_defaults_leave_text_alone(self):
        assert TokenNormalizer().normalize("Don't") == "Don't"

    def test_lowercase(self):
        assert TokenNormalizer(lowercase=True).normalize("HeLLo") == "hello"

    def test_strip_non_alphanumeric(self):
        normalizer = TokenNormalizer(strip_non_alphanumeric=True)
        assert normalizer.normalize("don't!") == "dont"
        assert normalizer.normalize("--") is None

    @pytest.mark.parametrize("token", ["42", "3.2", "3,456.789"])
    def test_strip_numeric_drops_numbers(self, token):
        assert TokenNormalizer(strip_numeric=True).normalize(token) is None

    @pytest.mark.parametrize("token", ["3a", "v2", ".,"])
    def test_strip_numeric_keeps_non_numbers(self, token):
        assert TokenNormalizer(strip_numeric=True).normalize(token) == token

    def test_stopwords_match_lowercased_form(self):
        normalizer = TokenNormalizer(lowercase=True, stopwords={"the"})
        assert normalizer.normalize("The") is None
        assert normalizer.normalize("dog") == "dog"

    def test_stopwords_are_case_sensitive(self):
        normalizer = TokenNormalizer(stopwords={"the"})
        assert normalizer.normalize("The") == "The"

    def test_filter_order_strip_before_stopwords(self):
        # "the," only becomes a stopword after stripping
        normalizer = TokenNormalizer(strip_non_alphanumeric=True, stopwords={"the"})
        assert normalizer.normalize("the,") is None

    def test_to_tokens_keeps_original_ranges(self):
        tokens = TokenNormalizer(lowercase=True).to_tokens("Big Dog", [(0, 3), (4, 7)])
        assert tokens == [Token(text="big", start=0, end=3), Token(text="dog", start=4, end=7)]


class TestBoundarySplitExtractor:
    def test_words_and_punctuation(self):
        tokens = BoundarySplitExtractor().extract("Hello, world!")
        assert _texts(tokens) == ["Hello", ",", "world", "!"]

    def test_strip_punctuation_drops_punctuation_tokens(self):
        extractor = BoundarySplitExtractor(strip_punctuation=True)
        assert _texts(extractor.extract("Hello, world!")) == ["Hello", "world"]

    def test_offsets(self):
        tokens = BoundarySplitExtractor().extract("Hi  you")
        assert [(t.start, t.end) for t in tokens] == [(0, 2), (4, 7)]

    def test_contractions_with_configured_scanner(self):
        extractor = BoundarySplitExtractor(
            scanner=create_scanner(keep_contractions=True), strip_punctuation=True
        )
        assert _texts(extractor.extract("'Isn't it,' she said.")) == [
            "Isn't",
            "it",
            "she",
            "said",
        ]

    def test_empty_text(self):
        assert BoundarySplitExtractor().extract("") == []


class TestPatternSplitExtractor:
    def test_whitespace_split_keeps_hyphens(self):
        extractor = PatternSplitExtractor(strip_punctuation=True)
        assert _texts(extractor.extract("fir-tree and sons")) == ["fir-tree", "and", "sons"]

    def test_edge_punctuation_is_stripped_greedily(self):
        extractor = PatternSplitExtractor(strip_punctuation=True)
        tokens = extractor.extract('"Well..." he said')
        assert _texts(tokens) == ["Well", "he", "said"]
        assert (tokens[0].start, tokens[0].end) == (1, 5)

    def test_custom_separator(self):
        extractor = PatternSplitExtractor(pattern=r"\s*,\s*")
        assert _texts(extractor.extract("a, b ,c")) == ["a", "b", "c"]

    def test_leading_and_trailing_separators(self):
        extractor = PatternSplitExtractor()
        assert _texts(extractor.extract("  one two  ")) == ["one", "two"]


class TestPatternExtractExtractor:
    def test_hyphenation_and_apostrophes(self):
        extractor = PatternExtractExtractor()
        tokens = extractor.extract("This isn't a sentence with hyphenated-words.")
        assert _texts(tokens) == [
            "This",
            "isn't",
            "a",
            "sentence",
            "with",
            "hyphenated-words",
        ]

    def test_leftmost_longest_match_wins(self):
        # a leftmost-first engine would stop at "ab"
        extractor = PatternExtractExtractor(pattern=r"ab|abcd")
        assert _texts(extractor.extract("abcd ab")) == ["abcd", "ab"]

    def test_empty_matches_are_skipped(self):
        extractor = PatternExtractExtractor(pattern=r"\d*")
        assert _texts(extractor.extract("a12b3")) == ["12", "3"]


class TestCharacterExtractor:
    def test_characters_skip_whitespace(self):
        assert _texts(CharacterExtractor().extract("ab c")) == ["a", "b", "c"]

    def test_combining_marks_stay_attached(self):
        tokens = CharacterExtractor().extract("e\u0301a")
        assert _texts(tokens) == ["e\u0301", "a"]
        assert (tokens[0].start, tokens[0].end) == (0, 2)

    def test_runs_follow_whitespace(self):
        runs = CharacterExtractor().extract_runs("nice  dog")
        assert [_texts(run) for run in runs] == [["n", "i", "c", "e"], ["d", "o", "g"]]

    def test_runs_ignoring_word_boundaries(self):
        runs = CharacterExtractor().extract_runs("to be", ignore_word_boundaries=True)
        assert [_texts(run) for run in runs] == [["t", "o", " ", "b", "e"]]

    def test_runs_of_empty_text(self):
        assert CharacterExtractor().extract_runs("") == []
        assert CharacterExtractor().extract_runs("", ignore_word_boundaries=True) == []
