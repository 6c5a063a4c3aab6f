"""
In-memory post source.

Serves a fixed list of posts with the same cursor rules as a live feed.
Used for one-off extraction from the command line and in tests.
"""

from typing import Iterable, List, Optional

from eitangos.config import MAX_RESULTS
from eitangos.models.post import RawPost
from eitangos.sources.base import FetchResult, PostSource


class StaticSource(PostSource):
    """
    Post source backed by a list.
    
    Posts are kept in the order given, which is treated as oldest first.
    A cursor selects the posts after the one with that id; an unknown
    cursor yields everything.
    """
    
    def __init__(self, posts: Iterable[RawPost] = ()):
        self._posts: List[RawPost] = list(posts)
    
    @property
    def name(self) -> str:
        return "static"
    
    @classmethod
    def from_texts(cls, texts: Iterable[str]) -> "StaticSource":
        """Build a source from plain strings, numbering the posts from 1."""
        return cls(RawPost(id=str(i), text=t) for i, t in enumerate(texts, start=1))
    
    def add_post(self, post: RawPost) -> None:
        """Append a post as the newest one."""
        self._posts.append(post)
    
    def fetch_posts(
        self,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> FetchResult:
        if limit is None:
            limit = MAX_RESULTS
        
        start = 0
        if cursor is not None:
            for index, post in enumerate(self._posts):
                if post.id == cursor:
                    start = index + 1
                    break
        
        # Like the live API, the newest `limit` posts win
        posts = self._posts[start:]
        if limit > 0:
            posts = posts[-limit:]
        
        new_cursor = posts[-1].id if posts else cursor
        return FetchResult(posts=posts, cursor=new_cursor)
