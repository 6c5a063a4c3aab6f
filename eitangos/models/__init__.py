"""
Data models module.

Defines data structures for fetched posts and vocabulary pairs.
"""

from eitangos.models.post import RawPost
from eitangos.models.vocabulary import VocabularyPair

__all__ = [
    "RawPost",
    "VocabularyPair",
]
