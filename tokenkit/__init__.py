"""
Rule-based text tokenization and n-gram extraction.

Documents are segmented into word, character, line, paragraph or sentence
tokens, normalized (lowercasing, character stripping, numeric and stopword
removal) and optionally expanded into sliding-window n-grams.

Examples:
    >>> from tokenkit import tokenize
    >>> tokenize(["fir-tree and sons"], strategy="regex").texts()
    [['fir-tree', 'and', 'sons']]
"""

from tokenkit.errors import ConfigurationError, MalformedInputError, TokenizerError
from tokenkit.extractor.types import Token
from tokenkit.tokenizer import (
    BatchTokenizationResult,
    DocumentError,
    ExtractionMode,
    TokenizationConfig,
    TokenizationStrategy,
    Tokenizer,
    TokenSequence,
    create_tokenizer,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "create_tokenizer",
    "tokenize",
    "Tokenizer",
    "TokenizationConfig",
    "TokenizationStrategy",
    "ExtractionMode",
    "Token",
    "TokenSequence",
    "DocumentError",
    "BatchTokenizationResult",
    "TokenizerError",
    "ConfigurationError",
    "MalformedInputError",
]
