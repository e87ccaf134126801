from functools import lru_cache
from typing import AbstractSet, FrozenSet, Iterable, List
import logging

from nltk.corpus import stopwords as nltk_stopwords

from tokenkit.errors import ConfigurationError

# Configure logging
logger = logging.getLogger(__name__)

NONE_SOURCE = "none"
NLTK_PREFIX = "nltk:"


def _nltk_languages() -> List[str]:
    try:
        return sorted(nltk_stopwords.fileids())
    except LookupError as e:
        raise ConfigurationError(
            "NLTK stopwords corpus is not installed; "
            'run `python -m nltk.downloader stopwords` or nltk.download("stopwords")'
        ) from e


@lru_cache(maxsize=None)
def _load_language(language: str) -> FrozenSet[str]:
    languages = _nltk_languages()
    if language not in languages:
        raise ConfigurationError(
            f"Unknown stopword language {language!r}; expected one of {languages}"
        )
    stopwords = frozenset(nltk_stopwords.words(language))
    logger.debug(f"Loaded {len(stopwords)} NLTK stopwords for {language!r}")
    return stopwords


def available_sources() -> List[str]:
    """
    Identifiers accepted by ``get_stopwords``, sorted.

    Raises:
        ConfigurationError: If the NLTK stopwords corpus is not installed
    """
    return [NONE_SOURCE] + [f"{NLTK_PREFIX}{lang}" for lang in _nltk_languages()]


def get_stopwords(source: str) -> FrozenSet[str]:
    """
    Resolve a stop-word source identifier to a set of stop words.

    Accepted identifiers are "none", "nltk:<language>" and the bare NLTK
    language name, e.g. "english". Lists are loaded once per language.

    Args:
        source: Source identifier

    Returns:
        The stop words as a frozenset

    Raises:
        ConfigurationError: If the identifier or language is unknown, or the
            NLTK stopwords corpus is not installed
    """
    if not isinstance(source, str) or not source:
        raise ConfigurationError(f"Invalid stopword source {source!r}")

    if source == NONE_SOURCE:
        return frozenset()

    if source.startswith(NLTK_PREFIX):
        language = source[len(NLTK_PREFIX) :]
    elif ":" in source:
        raise ConfigurationError(
            f"Unknown stopword source {source!r}; expected 'none', "
            f"'{NLTK_PREFIX}<language>' or a language name"
        )
    else:
        language = source

    return _load_language(language.lower())


def remove_stopwords(tokens: Iterable[str], stopwords: AbstractSet[str]) -> List[str]:
    """
    Drop every token found in ``stopwords`` (exact match), keeping order.

    Examples:
        >>> remove_stopwords(["the", "dog", "and", "cat"], {"the", "and"})
        ['dog', 'cat']
    """
    return [token for token in tokens if token not in stopwords]
