"""
Tokenizer facade.

Selects a tokenization strategy from an immutable TokenizationConfig,
runs it over each document of a batch and returns one TokenSequence per
document, in input order.
"""

from typing import Any, Optional

from tokenkit.tokenizer.tokenizer import (
    Tokenizer,
    resolve_config,
    tokenize,
    validate_config,
)
from tokenkit.tokenizer.types import (
    BatchTokenizationResult,
    DocumentError,
    ExtractionMode,
    TokenizationConfig,
    TokenizationStrategy,
    TokenSequence,
)


def create_tokenizer(
    config: Optional[TokenizationConfig] = None,
    max_workers: Optional[int] = None,
    use_processes: bool = False,
    **options: Any,
) -> Tokenizer:
    """
    Factory function to create a tokenizer instance.

    Args:
        config: Base configuration (default: word tokenization)
        max_workers: Maximum number of workers for parallel processing
        use_processes: Use processes instead of threads for batches
        **options: TokenizationConfig fields overriding ``config``

    Returns:
        Configured Tokenizer instance

    Raises:
        ConfigurationError: If the resulting configuration is invalid

    Examples:
        >>> tokenizer = create_tokenizer(lowercase=True)
        >>> isinstance(tokenizer, Tokenizer)
        True
    """
    return Tokenizer(
        config, max_workers=max_workers, use_processes=use_processes, **options
    )


__all__ = [
    "create_tokenizer",
    "tokenize",
    "resolve_config",
    "validate_config",
    "Tokenizer",
    "TokenizationConfig",
    "TokenizationStrategy",
    "ExtractionMode",
    "TokenSequence",
    "DocumentError",
    "BatchTokenizationResult",
]
