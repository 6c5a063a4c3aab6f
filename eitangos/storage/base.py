"""
Base storage abstraction for the vocabulary monitor.

Defines the abstract interface that all vocabulary stores must implement.
This allows swapping between Appwrite, an in-memory fake, etc.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from eitangos.models.vocabulary import VocabularyPair


class StorageError(RuntimeError):
    """Raised when a storage backend request fails."""


class SaveStatus(str, Enum):
    """Outcome of saving one pair."""
    INSERTED = "uploaded"
    EXISTS = "existing"
    FAILED = "error"


@dataclass
class UpsertResult:
    """
    Result of saving a batch of pairs.
    
    Attributes:
        inserted: Number of new documents created.
        existing: Number of pairs skipped because the term was already stored.
        failed: Number of pairs that failed to save.
        errors: List of error messages for failed pairs.
    """
    inserted: int = 0
    existing: int = 0
    failed: int = 0
    errors: List[str] = None
    
    def __post_init__(self):
        if self.errors is None:
            self.errors = []
    
    @property
    def total_processed(self) -> int:
        """Total number of pairs handled without error."""
        return self.inserted + self.existing
    
    def __str__(self) -> str:
        return f"UpsertResult(inserted={self.inserted}, existing={self.existing}, failed={self.failed})"


class VocabularyStorage(ABC):
    """
    Abstract base class for all vocabulary stores.
    
    Implementations must provide:
    - Lookup by exact term
    - Insert of a new pair
    - Document count
    
    save_pair() builds the duplicate check on top of those. The check and
    the insert are separate requests, so two concurrent writers can still
    insert the same term twice.
    """
    
    @property
    @abstractmethod
    def name(self) -> str:
        """
        Return the name of this storage backend.
        
        Used as the prefix of progress messages.
        """
        pass
    
    @abstractmethod
    def find_by_term(self, term: str) -> Optional[VocabularyPair]:
        """
        Find a stored pair whose term equals `term` exactly (case-sensitive).
        
        Raises:
            StorageError: If the lookup request fails.
        """
        pass
    
    @abstractmethod
    def insert_pair(self, pair: VocabularyPair) -> None:
        """
        Store a new pair under a backend-generated id.
        
        Raises:
            StorageError: If the insert fails.
        """
        pass
    
    @abstractmethod
    def count(self) -> int:
        """
        Return the number of stored pairs.
        
        Raises:
            StorageError: If the request fails.
        """
        pass
    
    def save_pair(self, pair: VocabularyPair) -> SaveStatus:
        """
        Insert `pair` unless a pair with the same term is already stored.
        
        Args:
            pair: The pair to save.
            
        Returns:
            SaveStatus.INSERTED, SaveStatus.EXISTS or SaveStatus.FAILED.
        """
        try:
            if self.find_by_term(pair.term) is not None:
                print(f"[{self.name}] Already exists: {pair.term}")
                return SaveStatus.EXISTS
            
            self.insert_pair(pair)
            print(f"[{self.name}] Uploaded: {pair}")
            return SaveStatus.INSERTED
            
        except (StorageError, ValueError) as e:
            print(f"[{self.name}] Error saving {pair.term}: {e}")
            return SaveStatus.FAILED
    
    def save_pairs(
        self,
        pairs: Iterable[VocabularyPair],
        on_saved: Optional[Callable[[VocabularyPair, SaveStatus], None]] = None,
    ) -> UpsertResult:
        """
        Save several pairs, skipping terms that are already stored.
        
        Args:
            pairs: Pairs to save.
            on_saved: Called with each pair and its SaveStatus.
            
        Returns:
            UpsertResult with inserted/existing/failed counts.
        """
        result = UpsertResult()
        
        for pair in pairs:
            status = self.save_pair(pair)
            
            if status is SaveStatus.INSERTED:
                result.inserted += 1
            elif status is SaveStatus.EXISTS:
                result.existing += 1
            else:
                result.failed += 1
                result.errors.append(f"Save failed for {pair.term}")
            
            if on_saved is not None:
                on_saved(pair, status)
        
        return result
    
    def __str__(self) -> str:
        return f"Storage({self.name})"
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
