"""
Stop-word sources backed by the NLTK stopwords corpus, and stop-word
filtering.
"""

from tokenkit.stopwords.sources import (
    NLTK_PREFIX,
    NONE_SOURCE,
    available_sources,
    get_stopwords,
    remove_stopwords,
)

__all__ = [
    "NLTK_PREFIX",
    "NONE_SOURCE",
    "available_sources",
    "get_stopwords",
    "remove_stopwords",
]
