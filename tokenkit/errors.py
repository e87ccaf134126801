from typing import Optional


class TokenizerError(Exception):
    """Base class for all tokenizer errors."""


class ConfigurationError(TokenizerError, ValueError):
    """Raised when a tokenization config is invalid or self-contradictory."""


class MalformedInputError(TokenizerError, ValueError):
    """
    Raised when a document is not a valid code-point sequence.

    Attributes:
        index: Position of the document in its batch
        offset: Code-point offset of the offending character, if known
    """

    def __init__(
        self, message: str, index: Optional[int] = None, offset: Optional[int] = None
    ):
        super().__init__(message)
        self.message = message
        self.index = index
        self.offset = offset

    def __str__(self) -> str:
        location = []
        if self.index is not None:
            location.append(f"document {self.index}")
        if self.offset is not None:
            location.append(f"offset {self.offset}")
        if location:
            return f"{self.message} ({', '.join(location)})"
        return self.message
