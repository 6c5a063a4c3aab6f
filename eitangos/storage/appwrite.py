"""
Appwrite storage backend for the vocabulary monitor.

Implements the VocabularyStorage interface on an Appwrite Databases
collection, using the REST API directly.

Appwrite API Documentation: https://appwrite.io/docs/references/cloud/server-rest/databases

=============================================================================
APPWRITE SCHEMA
=============================================================================

Required collection attributes (create these in the Appwrite console):

| Attribute | Type   | Description                              |
|-----------|--------|------------------------------------------|
| english   | String | The term; duplicate check key            |
| japanese  | String | The translation                          |

Attribute names can be changed with APPWRITE_TERM_FIELD and
APPWRITE_TRANSLATION_FIELD. Add an index on the term attribute so the
equality query stays fast. Document ids are generated by the server.

=============================================================================
"""

import json
import time
from typing import Any, Dict, List, Optional

import requests

from eitangos.config import (
    APPWRITE_API_KEY,
    APPWRITE_COLLECTION_ID,
    APPWRITE_DATABASE_ID,
    APPWRITE_ENDPOINT,
    APPWRITE_PROJECT_ID,
    APPWRITE_TERM_FIELD,
    APPWRITE_TRANSLATION_FIELD,
    REQUEST_TIMEOUT,
)
from eitangos.models.vocabulary import VocabularyPair
from eitangos.storage.base import StorageError, VocabularyStorage


def query_equal(attribute: str, value: Any) -> str:
    """Build an Appwrite `equal` query string."""
    return json.dumps(
        {"method": "equal", "attribute": attribute, "values": [value]},
        ensure_ascii=False,
    )


def query_limit(limit: int) -> str:
    """Build an Appwrite `limit` query string."""
    return json.dumps({"method": "limit", "values": [limit]})


class AppwriteStorage(VocabularyStorage):
    """
    Appwrite-backed storage implementation.
    
    Duplicate prevention is a lookup by term before each insert.
    
    Configuration is pulled from environment variables via eitangos.config:
    - APPWRITE_ENDPOINT: API base URL
    - APPWRITE_PROJECT_ID / APPWRITE_API_KEY: credentials
    - APPWRITE_DATABASE_ID / APPWRITE_COLLECTION_ID: target collection
    """
    
    # Special document id asking the server to generate one
    UNIQUE_ID = "unique()"
    
    # Minimum spacing between requests
    REQUEST_DELAY = 0.1
    
    def __init__(
        self,
        endpoint: str = None,
        project_id: str = None,
        api_key: str = None,
        database_id: str = None,
        collection_id: str = None,
        term_field: str = None,
        translation_field: str = None,
    ):
        """
        Initialize AppwriteStorage.
        
        Every argument defaults to the matching APPWRITE_* config value.
        """
        # Use provided values, or fall back to config if None (not empty string)
        self.endpoint = (endpoint if endpoint is not None else APPWRITE_ENDPOINT).rstrip("/")
        self.project_id = project_id if project_id is not None else APPWRITE_PROJECT_ID
        self.api_key = api_key if api_key is not None else APPWRITE_API_KEY
        self.database_id = database_id if database_id is not None else APPWRITE_DATABASE_ID
        self.collection_id = collection_id if collection_id is not None else APPWRITE_COLLECTION_ID
        self.term_field = term_field if term_field is not None else APPWRITE_TERM_FIELD
        self.translation_field = (
            translation_field if translation_field is not None else APPWRITE_TRANSLATION_FIELD
        )
        
        self._last_request_time = 0.0
    
    @property
    def name(self) -> str:
        return "appwrite"
    
    @property
    def _documents_url(self) -> str:
        """Construct the documents URL of the configured collection."""
        return (
            f"{self.endpoint}/databases/{self.database_id}"
            f"/collections/{self.collection_id}/documents"
        )
    
    @property
    def _headers(self) -> Dict[str, str]:
        """Construct headers for API requests."""
        return {
            "X-Appwrite-Project": self.project_id,
            "X-Appwrite-Key": self.api_key,
            "Content-Type": "application/json",
        }
    
    def _rate_limit(self) -> None:
        """Enforce a minimum delay between requests."""
        now = time.time()
        elapsed = now - self._last_request_time
        if elapsed < self.REQUEST_DELAY:
            time.sleep(self.REQUEST_DELAY - elapsed)
        self._last_request_time = time.time()
    
    def _validate_config(self) -> None:
        """Validate that required configuration is present."""
        if not self.project_id:
            raise ValueError("APPWRITE_PROJECT_ID is not configured")
        if not self.api_key:
            raise ValueError("APPWRITE_API_KEY is not configured")
        if not self.database_id:
            raise ValueError("APPWRITE_DATABASE_ID is not configured")
        if not self.collection_id:
            raise ValueError("APPWRITE_COLLECTION_ID is not configured")
    
    # =========================================================================
    # API Operations
    # =========================================================================
    
    def _list_documents(self, queries: List[str]) -> Dict[str, Any]:
        """
        List documents matching `queries`.
        
        Returns:
            Response body: {"total": int, "documents": [...]}.
            
        Raises:
            StorageError: On network errors, error statuses or bad JSON.
        """
        self._validate_config()
        self._rate_limit()
        
        try:
            response = requests.get(
                self._documents_url,
                headers=self._headers,
                params={"queries[]": queries},
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            return response.json()
            
        except (requests.RequestException, ValueError) as e:
            raise StorageError(f"list documents failed: {e}") from e
    
    def _create_document(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a document with a server-generated id.
        
        Raises:
            StorageError: On network errors or error statuses.
        """
        self._validate_config()
        self._rate_limit()
        
        payload = {
            "documentId": self.UNIQUE_ID,
            "data": data,
        }
        
        try:
            response = requests.post(
                self._documents_url,
                headers=self._headers,
                json=payload,
                timeout=REQUEST_TIMEOUT,
            )
            response.raise_for_status()
            return response.json()
            
        except (requests.RequestException, ValueError) as e:
            raise StorageError(f"create document failed: {e}") from e
    
    # =========================================================================
    # Storage Interface Implementation
    # =========================================================================
    
    def find_by_term(self, term: str) -> Optional[VocabularyPair]:
        body = self._list_documents([
            query_equal(self.term_field, term),
            query_limit(1),
        ])
        
        documents = body.get("documents") or []
        if not documents:
            return None
        
        try:
            return VocabularyPair.from_fields(
                documents[0],
                term_field=self.term_field,
                translation_field=self.translation_field,
            )
        except ValueError:
            # Document exists but is incomplete; the term is still taken
            return VocabularyPair(term=term, translation="?")
    
    def insert_pair(self, pair: VocabularyPair) -> None:
        self._create_document(
            pair.to_fields(
                term_field=self.term_field,
                translation_field=self.translation_field,
            )
        )
    
    def count(self) -> int:
        body = self._list_documents([query_limit(1)])
        return int(body.get("total", 0))


class MockAppwriteStorage(VocabularyStorage):
    """
    In-memory mock storage for testing and development.
    
    Use this when Appwrite is not configured or for testing.
    Data is stored in memory and lost when the process ends.
    """
    
    def __init__(self, pairs: List[VocabularyPair] = None):
        self._documents: Dict[str, VocabularyPair] = {}
        self._next_id = 1
        for pair in pairs or []:
            self.insert_pair(pair)
    
    @property
    def name(self) -> str:
        return "mock"
    
    def find_by_term(self, term: str) -> Optional[VocabularyPair]:
        for pair in self._documents.values():
            if pair.term == term:
                return pair
        return None
    
    def find_all_by_term(self, term: str) -> List[VocabularyPair]:
        """Return every stored pair with this term (for testing)."""
        return [pair for pair in self._documents.values() if pair.term == term]
    
    def insert_pair(self, pair: VocabularyPair) -> None:
        document_id = f"doc_{self._next_id}"
        self._next_id += 1
        self._documents[document_id] = pair
    
    def count(self) -> int:
        return len(self._documents)
    
    def all_pairs(self) -> List[VocabularyPair]:
        """Return stored pairs in insertion order."""
        return list(self._documents.values())
    
    def clear(self) -> None:
        """Clear all documents (for testing)."""
        self._documents.clear()
