"""
Sliding-window n-gram generation over word or character streams.
"""

from typing import Optional

from tokenkit.ngram.windower import NGramWindower


def create_windower(
    n: int = 3, n_min: Optional[int] = None, delimiter: str = " "
) -> NGramWindower:
    """
    Factory function to create an n-gram windower.

    Args:
        n: Largest window width
        n_min: Smallest window width (default: n)
        delimiter: Separator between word items

    Returns:
        Configured NGramWindower instance

    Examples:
        >>> windower = create_windower(n=2)
        >>> windower.windows(4)
        [(0, 2), (1, 2), (2, 2)]
    """
    return NGramWindower(n=n, n_min=n_min, delimiter=delimiter)


__all__ = ["create_windower", "NGramWindower"]
