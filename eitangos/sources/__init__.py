"""
Post sources module.

Feeds of posts to extract vocabulary from: X (Twitter) and an in-memory list.
"""

from eitangos.sources.base import FetchResult, PostSource
from eitangos.sources.static import StaticSource
from eitangos.sources.twitter import TwitterSource

__all__ = [
    "FetchResult",
    "PostSource",
    "StaticSource",
    "TwitterSource",
]
