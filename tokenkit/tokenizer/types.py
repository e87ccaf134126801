from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Dict, FrozenSet, List, Optional

from tokenkit.extractor.types import Token


class TokenizationStrategy(str, Enum):
    """Supported tokenization strategies."""

    WORDS = "words"
    CHARACTERS = "characters"
    NGRAMS = "ngrams"
    CHARACTER_SHINGLES = "character_shingles"
    REGEX = "regex"
    LINES = "lines"
    PARAGRAPHS = "paragraphs"
    SENTENCES = "sentences"


class ExtractionMode(str, Enum):
    """How a pattern is used by pattern-based word extraction."""

    SPLIT = "split"
    EXTRACT = "extract"


class TokenizationConfig(BaseModel):
    """
    Immutable tokenization options shared by every document of a batch.

    Cross-field checks (window widths, pattern syntax, stopword source) are
    done by ``validate_config`` so that they surface as ConfigurationError.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    strategy: TokenizationStrategy = Field(
        TokenizationStrategy.WORDS, description="Which tokenization strategy to run"
    )
    lowercase: bool = Field(False, description="Lowercase tokens")
    strip_non_alphanumeric: bool = Field(
        False, description="Remove code points that are not letters or digits"
    )
    strip_punctuation: bool = Field(
        False, description="Strip leading and trailing punctuation from tokens"
    )
    strip_numeric: bool = Field(False, description="Drop purely numeric tokens")
    n: int = Field(3, strict=True, description="Largest n-gram width")
    n_min: Optional[int] = Field(
        None, strict=True, description="Smallest n-gram width (default: n)"
    )
    delimiter: str = Field(" ", description="Separator between words of an n-gram")
    stopwords: FrozenSet[str] = Field(
        default_factory=frozenset, description="Tokens to drop after normalization"
    )
    stopword_source: Optional[str] = Field(
        None, description="Built-in stopword list merged with stopwords"
    )
    mode: ExtractionMode = Field(
        ExtractionMode.SPLIT, description="Pattern usage for pattern-based extraction"
    )
    pattern: Optional[str] = Field(
        None, description="Separator (split) or inclusion (extract) pattern"
    )
    keep_contractions: bool = Field(
        False, description="Keep 'letter apostrophe letter' together"
    )
    join_alphanumeric: bool = Field(
        False, description="Keep adjacent letters and digits together"
    )
    numeric_separators: str = Field(
        ".,", description="Separators allowed between digits of one number"
    )
    ignore_word_boundaries: bool = Field(
        False, description="Let character n-grams span whitespace"
    )

    @property
    def min_width(self) -> int:
        """Smallest n-gram width, resolving the n_min default."""
        return self.n if self.n_min is None else self.n_min


class DocumentError(BaseModel):
    """Why a single document could not be tokenized."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the document in the batch")
    offset: Optional[int] = Field(None, description="Offending code-point offset")
    message: str = Field(..., description="Error description")


class TokenSequence(BaseModel):
    """Tokens of one document, in document order."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=0, description="Position of the document in the batch")
    tokens: List[Token] = Field(default_factory=list, description="Extracted tokens")
    error: Optional[DocumentError] = Field(
        None, description="Set when the document was malformed"
    )

    @field_validator("tokens")
    @classmethod
    def validate_order(cls, v: List[Token]) -> List[Token]:
        """Tokens must be ordered by start offset."""
        starts = [token.start for token in v]
        if starts != sorted(starts):
            raise ValueError("Tokens must be in document order")
        return v

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def texts(self) -> List[str]:
        return [token.text for token in self.tokens]

    def __len__(self) -> int:
        return len(self.tokens)


class BatchTokenizationResult(BaseModel):
    """Model for batch tokenization results."""

    model_config = ConfigDict(frozen=True)

    sequences: List[TokenSequence] = Field(
        ..., description="One token sequence per input document, in input order"
    )
    failed_indices: List[int] = Field(
        default_factory=list, description="Indices of documents that failed to tokenize"
    )
    errors: Dict[int, DocumentError] = Field(
        default_factory=dict, description="Errors for failed documents"
    )

    def texts(self) -> List[List[str]]:
        """Token texts per document."""
        return [sequence.texts for sequence in self.sequences]
