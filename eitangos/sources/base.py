"""
Base source abstraction for the vocabulary monitor.

Defines the abstract interface that all post feeds must implement.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from eitangos.models.post import RawPost


@dataclass
class FetchResult:
    """
    Result of one fetch.
    
    Attributes:
        posts: New posts, oldest first.
        cursor: Newest post id seen, or the input cursor if nothing new arrived.
        rate_limited: True if the feed refused the request for rate limiting.
        error: Error message if the fetch failed.
    """
    posts: List[RawPost] = field(default_factory=list)
    cursor: Optional[str] = None
    rate_limited: bool = False
    error: Optional[str] = None
    
    @property
    def success(self) -> bool:
        return self.error is None
    
    def __len__(self) -> int:
        return len(self.posts)


class PostSource(ABC):
    """
    Abstract base class for all post feeds.
    
    The cursor is passed in and returned explicitly; sources keep no
    memory of what was fetched before.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the unique name identifier for this source.
        
        Used as the prefix of progress messages.
        """
        pass
    
    @abstractmethod
    def fetch_posts(
        self,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> FetchResult:
        """
        Fetch posts newer than `cursor`.
        
        Implementations should:
        - Return posts oldest first
        - Respect REQUEST_TIMEOUT from config
        - Skip entries that cannot be normalized
        - Report failures through FetchResult.error instead of raising
        
        Args:
            cursor: Id of the most recently processed post, or None for the latest page.
            limit: Maximum number of posts. If None, use config default.
            
        Returns:
            FetchResult with the posts and the advanced cursor.
        """
        pass
    
    def __str__(self) -> str:
        return f"Source({self.name})"
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
