"""
Segment extraction strategies.

Turns a document into an ordered list of tokens, either by cutting it at
boundaries / separator matches (split mode), by keeping only the spans that
match an inclusion pattern (extract mode), or character by character.
"""

from tokenkit.extractor.base import SegmentExtractor
from tokenkit.extractor.character_extractor import CharacterExtractor
from tokenkit.extractor.normalizer import TokenNormalizer
from tokenkit.extractor.pattern_extractor import PatternExtractExtractor
from tokenkit.extractor.split_extractor import (
    BoundarySplitExtractor,
    PatternSplitExtractor,
)
from tokenkit.extractor.types import Token
from tokenkit.extractor import patterns

__all__ = [
    "SegmentExtractor",
    "BoundarySplitExtractor",
    "PatternSplitExtractor",
    "PatternExtractExtractor",
    "CharacterExtractor",
    "TokenNormalizer",
    "Token",
    "patterns",
]
