import nltk
import pytest


@pytest.fixture(scope="session")
def nltk_stopwords_corpus():
    """Make sure the NLTK stopwords corpus is installed, downloading it once."""
    try:
        nltk.data.find("corpora/stopwords")
    except LookupError:
        if not nltk.download("stopwords", quiet=True):
            pytest.skip("NLTK stopwords corpus is not available")
        try:
            nltk.data.find("corpora/stopwords")
        except LookupError:
            pytest.skip("NLTK stopwords corpus is not available")
