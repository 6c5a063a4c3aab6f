"""
Tests for post sources.

Tests the PostSource interface contract, X API response parsing with
mocked network calls, cursor handling, and error handling.
"""

import pytest
from unittest.mock import Mock, patch
import requests

from eitangos.models.post import RawPost
from eitangos.sources.base import FetchResult, PostSource
from eitangos.sources.static import StaticSource
from eitangos.sources.twitter import (
    TwitterSource,
    USER_TWEETS_URL,
    MIN_RESULTS,
    MAX_PAGE_RESULTS,
)


def make_response(status_code=200, payload=None, headers=None, text=""):
    """Build a mocked requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.headers = headers or {}
    response.text = text
    response.json.return_value = payload if payload is not None else {}
    return response


# =============================================================================
# Test Source Interface Contract
# =============================================================================

class TestSourceInterface:
    """Tests for the PostSource abstract base class contract."""
    
    def test_source_is_abstract(self):
        with pytest.raises(TypeError):
            PostSource()
    
    def test_source_requires_fetch_posts(self):
        class IncompleteSource(PostSource):
            @property
            def name(self):
                return "incomplete"
        
        with pytest.raises(TypeError):
            IncompleteSource()
    
    def test_source_str_representation(self):
        assert "twitter" in str(TwitterSource(bearer_token="t", user_id="1"))


class TestFetchResult:
    """Tests for FetchResult."""
    
    def test_defaults(self):
        result = FetchResult()
        
        assert result.posts == []
        assert result.cursor is None
        assert result.success
        assert len(result) == 0
    
    def test_error_means_failure(self):
        assert not FetchResult(error="boom").success


# =============================================================================
# Test TwitterSource (Mocked)
# =============================================================================

class TestTwitterSource:
    """Tests for TwitterSource with mocked network calls."""
    
    @pytest.fixture
    def source(self):
        return TwitterSource(bearer_token="test-token", user_id="12345", timeout=5)
    
    @pytest.fixture
    def timeline_payload(self):
        """Sample timeline response (newest first, as the API returns it)."""
        return {
            "data": [
                {"id": "103", "text": "dog 犬", "created_at": "2025-01-15T10:00:00.000Z"},
                {"id": "102", "text": "Good morning!", "created_at": "2025-01-15T09:00:00.000Z"},
                {"id": "101", "text": "cat 猫", "created_at": "2025-01-15T08:00:00.000Z"},
            ],
            "meta": {"newest_id": "103", "oldest_id": "101", "result_count": 3},
        }
    
    def test_name_property(self, source):
        assert source.name == "twitter"
    
    def test_is_source_subclass(self, source):
        assert isinstance(source, PostSource)
    
    def test_fetch_returns_oldest_first(self, source, timeline_payload):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload=timeline_payload)
            
            result = source.fetch_posts()
        
        assert result.success
        assert [p.id for p in result.posts] == ["101", "102", "103"]
        assert all(isinstance(p, RawPost) for p in result.posts)
    
    def test_fetch_advances_cursor_to_newest(self, source, timeline_payload):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload=timeline_payload)
            
            result = source.fetch_posts(cursor="100")
        
        assert result.cursor == "103"
    
    def test_request_shape(self, source, timeline_payload):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload=timeline_payload)
            
            source.fetch_posts(cursor="100", limit=10)
        
        args, kwargs = mock_get.call_args
        assert args[0] == USER_TWEETS_URL.format(user_id="12345")
        assert kwargs["headers"]["Authorization"] == "Bearer test-token"
        assert kwargs["params"]["since_id"] == "100"
        assert kwargs["params"]["max_results"] == 10
        assert kwargs["params"]["tweet.fields"] == "created_at"
        assert kwargs["timeout"] == 5
    
    def test_no_cursor_omits_since_id(self, source, timeline_payload):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload=timeline_payload)
            
            source.fetch_posts()
        
        assert "since_id" not in mock_get.call_args.kwargs["params"]
    
    @pytest.mark.parametrize("limit,expected", [
        (1, MIN_RESULTS),
        (50, 50),
        (500, MAX_PAGE_RESULTS),
    ])
    def test_max_results_clamped(self, source, limit, expected):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload={"meta": {"result_count": 0}})
            
            source.fetch_posts(limit=limit)
        
        assert mock_get.call_args.kwargs["params"]["max_results"] == expected
    
    def test_no_new_posts_keeps_cursor(self, source):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload={"meta": {"result_count": 0}})
            
            result = source.fetch_posts(cursor="555")
        
        assert result.success
        assert result.posts == []
        assert result.cursor == "555"
    
    def test_malformed_entries_skipped(self, source):
        payload = {
            "data": [{"id": "2", "text": "dog 犬"}, {"text": "no id"}, "junk"],
            "meta": {"newest_id": "2"},
        }
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload=payload)
            
            result = source.fetch_posts()
        
        assert [p.id for p in result.posts] == ["2"]
    
    def test_cursor_falls_back_to_newest_post(self, source):
        payload = {"data": [{"id": "9", "text": "b"}, {"id": "8", "text": "a"}]}
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(payload=payload)
            
            result = source.fetch_posts()
        
        assert result.cursor == "9"
    
    def test_rate_limited(self, source):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=429, text="Too Many Requests")
            
            result = source.fetch_posts(cursor="77")
        
        assert result.rate_limited
        assert not result.success
        assert result.posts == []
        assert result.cursor == "77"
        assert "15 minutes" in result.error
    
    def test_rate_limited_reports_reset_time(self, source):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(
                status_code=429,
                headers={"x-rate-limit-reset": "1736935200"},
            )
            
            result = source.fetch_posts()
        
        assert result.rate_limited
        assert result.error.startswith("Rate limited until ")
    
    def test_http_error(self, source):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.return_value = make_response(status_code=401, text="Unauthorized")
            
            result = source.fetch_posts(cursor="5")
        
        assert not result.success
        assert not result.rate_limited
        assert "401" in result.error
        assert result.cursor == "5"
    
    def test_network_error(self, source):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            mock_get.side_effect = requests.ConnectionError("Network error")
            
            result = source.fetch_posts(cursor="5")
        
        assert result.posts == []
        assert result.cursor == "5"
        assert "Network error" in result.error
    
    def test_invalid_json(self, source):
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            response = make_response()
            response.json.side_effect = ValueError("Invalid JSON")
            mock_get.return_value = response
            
            result = source.fetch_posts()
        
        assert result.posts == []
        assert not result.success
    
    def test_missing_credentials_skip_request(self):
        source = TwitterSource(bearer_token="", user_id="")
        
        with patch("eitangos.sources.twitter.requests.get") as mock_get:
            result = source.fetch_posts(cursor="3")
        
        mock_get.assert_not_called()
        assert not result.success
        assert result.cursor == "3"


# =============================================================================
# Test StaticSource
# =============================================================================

class TestStaticSource:
    """Tests for the in-memory source."""
    
    def test_from_texts_numbers_posts(self):
        source = StaticSource.from_texts(["a", "b"])
        
        result = source.fetch_posts()
        
        assert [(p.id, p.text) for p in result.posts] == [("1", "a"), ("2", "b")]
        assert result.cursor == "2"
    
    def test_cursor_selects_newer_posts(self, static_source):
        result = static_source.fetch_posts(cursor="3")
        
        assert [p.id for p in result.posts] == ["4", "5"]
        assert result.cursor == "5"
    
    def test_cursor_at_end_returns_nothing(self, static_source):
        result = static_source.fetch_posts(cursor="5")
        
        assert result.posts == []
        assert result.cursor == "5"
    
    def test_unknown_cursor_returns_everything(self, static_source):
        result = static_source.fetch_posts(cursor="999")
        
        assert len(result.posts) == 5
    
    def test_limit_keeps_newest(self, static_source):
        result = static_source.fetch_posts(limit=2)
        
        assert [p.id for p in result.posts] == ["4", "5"]
    
    def test_add_post(self):
        source = StaticSource()
        source.add_post(RawPost(id="a", text="cat 猫"))
        
        assert source.fetch_posts().cursor == "a"
