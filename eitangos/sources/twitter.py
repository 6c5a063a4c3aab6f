"""
X (Twitter) source implementation.

Fetches the monitored account's timeline using the v2 REST API.
API Documentation: https://developer.x.com/en/docs/x-api/tweets/timelines/api-reference/get-users-id-tweets
"""

from datetime import datetime
from typing import List, Optional
import requests

from eitangos.config import (
    MAX_RESULTS,
    REQUEST_TIMEOUT,
    TWITTER_BEARER_TOKEN,
    TWITTER_USER_ID,
)
from eitangos.models.post import RawPost
from eitangos.sources.base import FetchResult, PostSource


# X API v2 endpoints
TWITTER_API_BASE = "https://api.twitter.com/2"
USER_TWEETS_URL = f"{TWITTER_API_BASE}/users/{{user_id}}/tweets"

# The timeline endpoint accepts 5..100 results per page
MIN_RESULTS = 5
MAX_PAGE_RESULTS = 100

USER_AGENT = "EITANGOS-Monitor/1.0"


class TwitterSource(PostSource):
    """
    Fetches recent posts from one X account.
    
    Uses the user timeline endpoint with `since_id` set to the cursor, so
    each poll only returns posts newer than the last processed one. The API
    returns newest first; results are reversed before returning.
    
    Errors (network, HTTP status, bad JSON) are reported and produce an
    empty FetchResult that keeps the input cursor.
    """
    
    def __init__(
        self,
        bearer_token: str = None,
        user_id: str = None,
        timeout: int = None,
    ):
        """
        Initialize TwitterSource.
        
        Args:
            bearer_token: API bearer token. Defaults to config.TWITTER_BEARER_TOKEN.
            user_id: Account to monitor. Defaults to config.TWITTER_USER_ID.
            timeout: Request timeout. Defaults to config.REQUEST_TIMEOUT.
        """
        self.bearer_token = bearer_token if bearer_token is not None else TWITTER_BEARER_TOKEN
        self.user_id = user_id if user_id is not None else TWITTER_USER_ID
        self.timeout = timeout if timeout is not None else REQUEST_TIMEOUT
    
    @property
    def name(self) -> str:
        return "twitter"
    
    @property
    def _url(self) -> str:
        return USER_TWEETS_URL.format(user_id=self.user_id)
    
    @property
    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.bearer_token}",
            "User-Agent": USER_AGENT,
        }
    
    def _build_params(self, cursor: Optional[str], limit: int) -> dict:
        params = {
            "max_results": max(MIN_RESULTS, min(limit, MAX_PAGE_RESULTS)),
            "tweet.fields": "created_at",
        }
        if cursor:
            params["since_id"] = cursor
        return params
    
    def fetch_posts(
        self,
        cursor: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> FetchResult:
        """
        Fetch posts newer than `cursor`.
        
        Args:
            cursor: since_id for the request, or None for the latest page.
            limit: Posts per request. Defaults to MAX_RESULTS.
            
        Returns:
            FetchResult with posts oldest first.
        """
        if limit is None:
            limit = MAX_RESULTS
        
        if not self.bearer_token or not self.user_id:
            message = "TWITTER_BEARER_TOKEN and TWITTER_USER_ID must be configured"
            print(f"[{self.name}] {message}")
            return FetchResult(cursor=cursor, error=message)
        
        try:
            response = requests.get(
                self._url,
                headers=self._headers,
                params=self._build_params(cursor, limit),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            print(f"[{self.name}] Error fetching posts: {e}")
            return FetchResult(cursor=cursor, error=str(e))
        
        if response.status_code == 429:
            message = self._rate_limit_message(response)
            print(f"[{self.name}] {message}")
            return FetchResult(cursor=cursor, rate_limited=True, error=message)
        
        if not response.ok:
            message = f"API error: {response.status_code} - {response.text}"
            print(f"[{self.name}] {message}")
            return FetchResult(cursor=cursor, error=message)
        
        try:
            data = response.json()
        except ValueError as e:
            print(f"[{self.name}] Error parsing response: {e}")
            return FetchResult(cursor=cursor, error=str(e))
        
        posts = self._parse_posts(data)
        
        # newest_id covers the page even when some entries were unparseable
        meta = data.get("meta") or {}
        new_cursor = meta.get("newest_id") or (posts[-1].id if posts else None) or cursor
        
        print(f"[{self.name}] Fetched {len(posts)} posts")
        return FetchResult(posts=posts, cursor=new_cursor)
    
    def _parse_posts(self, data: dict) -> List[RawPost]:
        """
        Convert the API payload into RawPosts, oldest first.
        
        Payload structure:
        {
            "data": [{"id": "...", "text": "...", "created_at": "..."}, ...],
            "meta": {"newest_id": "...", "oldest_id": "...", "result_count": 2}
        }
        """
        if not isinstance(data, dict):
            return []
        
        posts = []
        for raw in data.get("data") or []:
            post = RawPost.from_api(raw)
            if post is not None:
                posts.append(post)
        
        posts.reverse()
        return posts
    
    @staticmethod
    def _rate_limit_message(response) -> str:
        """Describe a 429 response, including when the window resets if known."""
        reset = response.headers.get("x-rate-limit-reset")
        if reset:
            try:
                reset_at = datetime.fromtimestamp(int(reset))
                return f"Rate limited until {reset_at.strftime('%Y-%m-%d %H:%M:%S')}"
            except (ValueError, OverflowError, OSError):
                pass
        return "Rate limited. Please try again in 15 minutes."
