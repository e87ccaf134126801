from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed
from collections.abc import Mapping
from typing import Any, FrozenSet, Iterable, List, Optional, Union
import logging
import multiprocessing

from pydantic import ValidationError
import regex

from tokenkit.boundary.scanner import BoundaryScanner
from tokenkit.boundary.types import BoundaryRules
from tokenkit.classifier import create_classifier
from tokenkit.errors import ConfigurationError, MalformedInputError
from tokenkit.extractor import patterns
from tokenkit.extractor.base import SegmentExtractor
from tokenkit.extractor.character_extractor import CharacterExtractor
from tokenkit.extractor.normalizer import TokenNormalizer
from tokenkit.extractor.pattern_extractor import PatternExtractExtractor
from tokenkit.extractor.split_extractor import (
    BoundarySplitExtractor,
    PatternSplitExtractor,
)
from tokenkit.extractor.types import Token
from tokenkit.ngram.windower import NGramWindower
from tokenkit.stopwords.sources import get_stopwords
from tokenkit.tokenizer.types import (
    BatchTokenizationResult,
    DocumentError,
    ExtractionMode,
    TokenizationConfig,
    TokenizationStrategy,
    TokenSequence,
)

# Configure logging
logger = logging.getLogger(__name__)

ConfigLike = Union[TokenizationConfig, Mapping, None]

_PATTERN_STRATEGIES = (
    TokenizationStrategy.WORDS,
    TokenizationStrategy.NGRAMS,
    TokenizationStrategy.REGEX,
)

_FIXED_SPLIT_PATTERNS = {
    TokenizationStrategy.LINES: patterns.LINE_BREAK,
    TokenizationStrategy.PARAGRAPHS: patterns.PARAGRAPH_BREAK,
    TokenizationStrategy.SENTENCES: patterns.SENTENCE_BREAK,
}

_SURROGATE = regex.compile(r"[\ud800-\udfff]")


def resolve_config(config: ConfigLike = None, **options: Any) -> TokenizationConfig:
    """
    Build a validated TokenizationConfig.

    Args:
        config: An existing config, a mapping of options, or None
        **options: Option overrides

    Returns:
        The validated config

    Raises:
        ConfigurationError: If an option is unknown, has the wrong type, or
            the combination of options is invalid
    """
    if isinstance(config, TokenizationConfig):
        values = config.model_dump()
    elif isinstance(config, Mapping):
        values = dict(config)
    elif config is None:
        values = {}
    else:
        raise ConfigurationError(
            f"config must be a TokenizationConfig or a mapping, got {type(config).__name__}"
        )
    values.update(options)

    try:
        resolved = TokenizationConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid tokenization config: {e}") from e

    validate_config(resolved)
    return resolved


def validate_config(config: TokenizationConfig) -> None:
    """
    Check the cross-field invariants of a config.

    Raises:
        ConfigurationError: If the config is invalid
    """
    for name, value in (("n", config.n), ("n_min", config.min_width)):
        if value < 1:
            raise ConfigurationError(f"{name} must be a positive integer, got {value}")
    if config.min_width > config.n:
        raise ConfigurationError(f"n_min ({config.min_width}) must not exceed n ({config.n})")

    for char in config.numeric_separators:
        if char.isalnum() or char.isspace():
            raise ConfigurationError(f"Invalid numeric separator: {char!r}")

    if config.pattern is not None:
        if config.strategy not in _PATTERN_STRATEGIES:
            raise ConfigurationError(
                f"pattern is not used by the {config.strategy.value!r} strategy"
            )
        flags = regex.POSIX if config.mode == ExtractionMode.EXTRACT else 0
        try:
            regex.compile(config.pattern, flags)
        except regex.error as e:
            raise ConfigurationError(f"Invalid pattern {config.pattern!r}: {e}") from e

    if config.stopword_source is not None:
        get_stopwords(config.stopword_source)


class Tokenizer:
    """
    Tokenizer facade: runs the configured segment extractor over each
    document, then the n-gram windower for the n-gram strategies.

    The tokenizer holds no mutable state after construction, so identical
    documents and config always produce identical output, and batches can
    be processed in parallel.
    """

    def __init__(
        self,
        config: ConfigLike = None,
        max_workers: Optional[int] = None,
        use_processes: bool = False,
        **options: Any,
    ):
        """
        Initialize the tokenizer.

        Args:
            config: TokenizationConfig or mapping of options (default: words)
            max_workers: Maximum number of workers for batches (None for CPU count)
            use_processes: Use ProcessPoolExecutor instead of ThreadPoolExecutor
            **options: Config option overrides

        Raises:
            ConfigurationError: If the config is invalid
        """
        self.config = resolve_config(config, **options)
        self._max_workers = max_workers or multiprocessing.cpu_count()
        self._use_processes = use_processes

        cfg = self.config
        self._classifier = create_classifier(keep_contractions=cfg.keep_contractions)
        self._stopwords = self._collect_stopwords()
        self._normalizer = TokenNormalizer(
            classifier=self._classifier,
            lowercase=cfg.lowercase,
            strip_non_alphanumeric=cfg.strip_non_alphanumeric,
            strip_numeric=cfg.strip_numeric,
            stopwords=self._stopwords,
            numeric_separators=cfg.numeric_separators,
        )
        self._windower = NGramWindower(n=cfg.n, n_min=cfg.min_width, delimiter=cfg.delimiter)
        self._extractor = self._build_extractor()

        logger.info(
            f"Initialized Tokenizer with strategy={cfg.strategy.value}, "
            f"extractor={type(self._extractor).__name__}, max_workers={self._max_workers}"
        )

    @property
    def stopwords(self) -> FrozenSet[str]:
        return self._stopwords

    def _collect_stopwords(self) -> FrozenSet[str]:
        stopwords = frozenset(self.config.stopwords)
        if self.config.stopword_source is not None:
            stopwords |= get_stopwords(self.config.stopword_source)
        return stopwords

    def _build_extractor(self) -> SegmentExtractor:
        cfg = self.config
        common = dict(
            normalizer=self._normalizer,
            classifier=self._classifier,
            strip_punctuation=cfg.strip_punctuation,
        )

        if cfg.strategy in (
            TokenizationStrategy.CHARACTERS,
            TokenizationStrategy.CHARACTER_SHINGLES,
        ):
            return CharacterExtractor(**common)

        if cfg.strategy in _FIXED_SPLIT_PATTERNS:
            return PatternSplitExtractor(_FIXED_SPLIT_PATTERNS[cfg.strategy], **common)

        uses_pattern = (
            cfg.strategy == TokenizationStrategy.REGEX
            or cfg.pattern is not None
            or cfg.mode == ExtractionMode.EXTRACT
        )
        if not uses_pattern:
            scanner = BoundaryScanner(
                classifier=self._classifier,
                rules=BoundaryRules(
                    join_alphanumeric=cfg.join_alphanumeric,
                    numeric_separators=cfg.numeric_separators,
                ),
            )
            return BoundarySplitExtractor(
                scanner=scanner,
                normalizer=self._normalizer,
                strip_punctuation=cfg.strip_punctuation,
            )

        if cfg.mode == ExtractionMode.EXTRACT:
            return PatternExtractExtractor(cfg.pattern or patterns.HYPHENATED_WORD, **common)
        return PatternSplitExtractor(cfg.pattern or patterns.WHITESPACE, **common)

    def tokenize_document(self, text: str, index: int = 0) -> TokenSequence:
        """
        Tokenize a single document.

        Args:
            text: Input text string
            index: Position of the document in its batch

        Returns:
            TokenSequence holding the document's tokens

        Raises:
            MalformedInputError: If the document is not a valid string

        Examples:
            >>> tokenizer = Tokenizer(strategy="ngrams", n=2)
            >>> tokenizer.tokenize_document("a b c d").texts
            ['a b', 'b c', 'c d']
        """
        self._check_document(text, index)
        tokens = self._run_strategy(text)
        logger.debug(f"Tokenized document {index}: {len(text)} code points, {len(tokens)} tokens")
        return TokenSequence(index=index, tokens=tokens)

    def _run_strategy(self, text: str) -> List[Token]:
        strategy = self.config.strategy

        if strategy == TokenizationStrategy.CHARACTER_SHINGLES:
            runs = self._extractor.extract_runs(
                text, ignore_word_boundaries=self.config.ignore_word_boundaries
            )
            tokens = []
            for run in runs:
                tokens.extend(self._windower.window_tokens(run, joiner=""))
            return tokens

        tokens = self._extractor.extract(text)
        if strategy == TokenizationStrategy.NGRAMS:
            return self._windower.window_tokens(tokens)
        return tokens

    def _check_document(self, text: Any, index: int) -> None:
        if not isinstance(text, str):
            raise MalformedInputError(
                f"Expected a string, got {type(text).__name__}", index=index
            )
        match = _SURROGATE.search(text)
        if match is not None:
            raise MalformedInputError(
                f"Unpaired surrogate U+{ord(match.group()):04X}",
                index=index,
                offset=match.start(),
            )

    def tokenize(self, documents: Iterable[str]) -> BatchTokenizationResult:
        """
        Tokenize a batch of documents, in parallel when worth it.

        A malformed document gets an empty TokenSequence carrying its error
        and is listed in ``failed_indices``; the rest of the batch is
        unaffected.

        Args:
            documents: Input text strings

        Returns:
            BatchTokenizationResult with one sequence per document, in order

        Raises:
            TypeError: If a single string is passed instead of a sequence

        Examples:
            >>> tokenizer = Tokenizer(strip_punctuation=True)
            >>> tokenizer.tokenize(["Hello world", ""]).texts()
            [['Hello', 'world'], []]
        """
        if isinstance(documents, str):
            raise TypeError("documents must be a sequence of strings, not a string")

        documents = list(documents)
        if not documents:
            return BatchTokenizationResult(sequences=[], failed_indices=[], errors={})

        logger.info(f"Starting batch tokenization of {len(documents)} documents")

        sequences: List[Optional[TokenSequence]] = [None] * len(documents)

        if self._max_workers == 1 or len(documents) == 1:
            for index, text in enumerate(documents):
                sequences[index] = self._tokenize_single(index, text)
        else:
            executor_class = ProcessPoolExecutor if self._use_processes else ThreadPoolExecutor
            with executor_class(max_workers=self._max_workers) as executor:
                future_to_index = {
                    executor.submit(self._tokenize_single, index, text): index
                    for index, text in enumerate(documents)
                }
                for future in as_completed(future_to_index):
                    sequences[future_to_index[future]] = future.result()

        errors = {}
        for sequence in sequences:
            if sequence.error is not None:
                logger.error(
                    f"Failed to tokenize document at index {sequence.index}: "
                    f"{sequence.error.message}"
                )
                errors[sequence.index] = sequence.error

        logger.info(
            f"Batch tokenization complete: {len(documents) - len(errors)} successful, "
            f"{len(errors)} failed"
        )

        return BatchTokenizationResult(
            sequences=sequences, failed_indices=sorted(errors), errors=errors
        )

    def _tokenize_single(self, index: int, text: str) -> TokenSequence:
        """
        Helper for batch tokenization of a single document.

        Returns:
            The document's TokenSequence, or an empty one carrying the error
        """
        try:
            return self.tokenize_document(text, index)
        except MalformedInputError as e:
            return TokenSequence(
                index=index,
                error=DocumentError(index=index, offset=e.offset, message=e.message),
            )


def tokenize(
    documents: Iterable[str], config: ConfigLike = None, **options: Any
) -> BatchTokenizationResult:
    """
    Tokenize a batch of documents with a one-off Tokenizer.

    Args:
        documents: Input text strings
        config: TokenizationConfig or mapping of options
        **options: Config option overrides

    Returns:
        BatchTokenizationResult with one sequence per document, in order

    Raises:
        ConfigurationError: If the config is invalid; no document is processed
    """
    return Tokenizer(config, max_workers=1, **options).tokenize(documents)
