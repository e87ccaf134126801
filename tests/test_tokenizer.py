"""Tests for the tokenizer facade."""

import pytest

from tokenkit import (
    BatchTokenizationResult,
    ConfigurationError,
    MalformedInputError,
    TokenizationConfig,
    TokenizationStrategy,
    Tokenizer,
    create_tokenizer,
    tokenize,
)
from tokenkit.tokenizer import resolve_config


def _texts(text, **options):
    return tokenize([text], **options).sequences[0].texts


class TestExamples:
    def test_whitespace_split_keeps_hyphen(self):
        assert _texts(
            "fir-tree and sons", strategy="regex", mode="split", strip_punctuation=True
        ) == ["fir-tree", "and", "sons"]

    def test_extract_hyphenated_words(self):
        assert _texts(
            "This isn't a sentence with hyphenated-words.",
            strategy="regex",
            mode="extract",
        ) == ["This", "isn't", "a", "sentence", "with", "hyphenated-words"]

    def test_character_shingles_stay_within_words(self):
        assert _texts("nice dog", strategy="character_shingles", n=3) == [
            "nic",
            "ice",
            "dog",
        ]

    def test_character_shingles_across_words(self):
        assert _texts(
            "nice dog", strategy="character_shingles", n=3, ignore_word_boundaries=True
        ) == ["nic", "ice", "ce ", "e d", " do", "dog"]

    def test_word_bigrams(self):
        assert _texts("a b c d", strategy="ngrams", n=2) == ["a b", "b c", "c d"]

    def test_empty_document(self):
        result = tokenize([""])
        assert len(result.sequences) == 1
        assert len(result.sequences[0]) == 0
        assert result.failed_indices == []


class TestStrategies:
    def test_words_keep_punctuation_by_default(self):
        assert _texts("Hello, world!") == ["Hello", ",", "world", "!"]

    def test_words_normalized(self):
        assert _texts(
            "The 3 Dogs, 4.5 cats!",
            lowercase=True,
            strip_punctuation=True,
            strip_numeric=True,
        ) == ["the", "dogs", "cats"]

    def test_words_with_contractions_and_alphanumerics(self):
        assert _texts(
            "Don't buy 3a now",
            keep_contractions=True,
            join_alphanumeric=True,
            strip_punctuation=True,
        ) == ["Don't", "buy", "3a", "now"]

    def test_words_with_extract_mode_default_pattern(self):
        assert _texts("well-known 42 facts.", mode="extract") == ["well-known", "facts"]

    def test_characters(self):
        assert _texts("Hi !", strategy="characters") == ["H", "i", "!"]
        assert _texts("Hi !", strategy="characters", strip_punctuation=True) == ["H", "i"]

    def test_ngram_range_ordering(self):
        assert _texts("a b c", strategy="ngrams", n=2, n_min=1) == [
            "a",
            "a b",
            "b",
            "b c",
            "c",
        ]

    def test_ngrams_after_stopword_removal(self, nltk_stopwords_corpus):
        assert _texts(
            "The cat and the hat",
            strategy="ngrams",
            n=2,
            lowercase=True,
            stopword_source="english",
            delimiter="_",
        ) == ["cat_hat"]

    def test_ngrams_over_pattern_tokens(self):
        assert _texts(
            "fir-tree and sons", strategy="ngrams", n=2, pattern=r"\s+"
        ) == ["fir-tree and", "and sons"]

    def test_ngram_offsets(self):
        tokens = tokenize(["big red dog"], strategy="ngrams", n=2).sequences[0].tokens
        assert [(t.start, t.end) for t in tokens] == [(0, 7), (4, 11)]

    def test_short_document_yields_no_ngrams(self):
        assert _texts("one two", strategy="ngrams", n=3) == []

    def test_lines(self):
        assert _texts("first\r\nsecond\n\nthird\n", strategy="lines") == [
            "first",
            "second",
            "third",
        ]

    def test_paragraphs(self):
        text = "Para one\nstill one.\n\n  \nPara two."
        assert _texts(text, strategy="paragraphs") == ["Para one\nstill one.", "Para two."]

    def test_sentences(self):
        assert _texts("Hello there. How are you?  Fine!", strategy="sentences") == [
            "Hello there.",
            "How are you?",
            "Fine!",
        ]

    def test_stopwords_set_and_source_are_merged(self, nltk_stopwords_corpus):
        assert _texts(
            "the quick brown fox",
            stopwords={"quick"},
            stopword_source="english",
        ) == ["brown", "fox"]


class TestProperties:
    TEXT = "It's 3.5 o'clock,\r\nisn't it?  Yes! Ünïcode\ttext … done."

    @pytest.mark.parametrize(
        "strategy", [s.value for s in TokenizationStrategy]
    )
    def test_deterministic(self, strategy):
        first = tokenize([self.TEXT], strategy=strategy, n=2, n_min=1)
        second = tokenize([self.TEXT], strategy=strategy, n=2, n_min=1)
        assert first == second

    @pytest.mark.parametrize("strategy", ["words", "characters", "regex", "lines"])
    def test_tokens_and_separators_reconstruct_text(self, strategy):
        tokens = tokenize([self.TEXT], strategy=strategy).sequences[0].tokens
        rebuilt, last = [], 0
        for token in tokens:
            assert token.start >= last
            gap = self.TEXT[last : token.start]
            assert gap.strip() == ""
            assert self.TEXT[token.start : token.end] == token.text
            rebuilt.append(gap)
            rebuilt.append(token.text)
            last = token.end
        rebuilt.append(self.TEXT[last:])
        assert "".join(rebuilt) == self.TEXT

    def test_stopword_filtering_idempotent(self, nltk_stopwords_corpus):
        config = TokenizationConfig(
            lowercase=True, strip_punctuation=True, stopword_source="english"
        )
        once = tokenize([self.TEXT], config).sequences[0].texts
        twice = tokenize([" ".join(once)], config).sequences[0].texts
        assert once == twice


class TestConfiguration:
    @pytest.mark.parametrize(
        "options",
        [
            {"n": 2, "n_min": 3},
            {"n": 0},
            {"n": -2},
            {"n": True},
            {"strategy": "ngrams", "n": 2, "n_min": True},
            {"n": "2"},
            {"n_min": 0},
            {"stopword_source": "klingon"},
            {"strategy": "regex", "pattern": "("},
            {"strategy": "characters", "pattern": r"\s+"},
            {"numeric_separators": "a"},
            {"strategy": "morphemes"},
            {"unknown_option": True},
        ],
    )
    def test_invalid_config_fails_fast(self, options):
        with pytest.raises(ConfigurationError):
            tokenize(["some text"], **options)

    def test_invalid_config_type(self):
        with pytest.raises(ConfigurationError):
            Tokenizer(config=42)

    def test_config_is_immutable(self):
        config = TokenizationConfig()
        with pytest.raises(Exception):
            config.n = 5

    def test_n_min_defaults_to_n(self):
        assert TokenizationConfig(n=4).min_width == 4
        assert TokenizationConfig(n=4, n_min=2).min_width == 2

    def test_resolve_config_overrides(self):
        base = TokenizationConfig(lowercase=True, n=2)
        resolved = resolve_config(base, n=5, stopwords=["a"])
        assert resolved.lowercase is True
        assert resolved.n == 5
        assert resolved.stopwords == frozenset({"a"})

    def test_accepts_mapping(self):
        tokenizer = create_tokenizer({"strategy": "ngrams", "n": 2})
        assert tokenizer.config.strategy == TokenizationStrategy.NGRAMS
        assert tokenizer.stopwords == frozenset()


class TestBatches:
    def test_output_order_matches_input(self):
        documents = [f"doc {i} words" for i in range(50)]
        tokenizer = Tokenizer(max_workers=4)
        result = tokenizer.tokenize(documents)
        assert isinstance(result, BatchTokenizationResult)
        assert [s.index for s in result.sequences] == list(range(50))
        assert result.texts()[7] == ["doc", "7", "words"]

    def test_parallel_matches_sequential(self):
        documents = ["alpha beta", "", "gamma, delta!", "x y z"] * 5
        parallel = Tokenizer(max_workers=3, strategy="ngrams", n=2, n_min=1).tokenize(documents)
        sequential = Tokenizer(max_workers=1, strategy="ngrams", n=2, n_min=1).tokenize(documents)
        assert parallel == sequential

    def test_process_pool_matches_sequential(self):
        documents = ["alpha beta", "bad\ud800x", "gamma, delta!", 7, "x y z"]
        in_processes = Tokenizer(max_workers=2, use_processes=True).tokenize(documents)
        sequential = Tokenizer(max_workers=1).tokenize(documents)
        assert in_processes == sequential
        assert in_processes.failed_indices == [1, 3]
        assert in_processes.texts()[2] == ["gamma", ",", "delta", "!"]

    def test_malformed_documents_do_not_abort_batch(self):
        result = Tokenizer(max_workers=2).tokenize(["ok then", "bad\ud800x", 42, "fine"])
        assert len(result.sequences) == 4
        assert result.failed_indices == [1, 2]
        assert result.sequences[0].texts == ["ok", "then"]
        assert result.sequences[3].texts == ["fine"]
        assert result.errors[1].offset == 3
        assert result.errors[2].offset is None
        assert not result.sequences[1].ok
        assert result.sequences[1].tokens == []

    def test_tokenize_document_raises_for_malformed_input(self):
        with pytest.raises(MalformedInputError) as excinfo:
            Tokenizer().tokenize_document("ab\udc00", index=5)
        assert excinfo.value.index == 5
        assert excinfo.value.offset == 2
        assert "document 5" in str(excinfo.value)

    def test_empty_batch(self):
        result = tokenize([])
        assert result.sequences == []
        assert result.errors == {}

    def test_single_string_rejected(self):
        with pytest.raises(TypeError):
            Tokenizer().tokenize("not a batch")

    def test_generator_input(self):
        result = tokenize(text for text in ["a b", "c"])
        assert result.texts() == [["a", "b"], ["c"]]
