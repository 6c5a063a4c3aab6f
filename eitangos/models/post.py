"""
RawPost model: a single post as delivered by the feed.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class RawPost:
    """
    An immutable post fetched from the monitored account.
    
    Attributes:
        id: Platform post ID. Also used as the polling cursor.
        text: Full post text.
        created_at: When the post was published, if the API reported it.
    """
    
    id: str
    text: str
    created_at: Optional[datetime] = None
    
    @classmethod
    def from_api(cls, raw: dict) -> Optional["RawPost"]:
        """
        Build a RawPost from an API payload entry.
        
        X API v2 tweet structure:
        {
            "id": "1234567890",
            "text": "cat 猫",
            "created_at": "2025-01-01T12:00:00.000Z"   # with tweet.fields=created_at
        }
        
        Returns:
            RawPost, or None if id or text is missing.
        """
        if not raw or not isinstance(raw, dict):
            return None
        
        post_id = raw.get("id")
        text = raw.get("text")
        if not post_id or text is None:
            return None
        
        created_at = None
        if raw.get("created_at"):
            try:
                created_at = datetime.fromisoformat(
                    raw["created_at"].replace("Z", "+00:00")
                )
            except (ValueError, AttributeError):
                pass
        
        return cls(id=str(post_id), text=str(text), created_at=created_at)
    
    def __str__(self) -> str:
        return f"[{self.id}] {self.text}"
