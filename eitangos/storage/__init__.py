"""
Storage module.

Handles persistence of vocabulary pairs and of the polling cursor.
"""

from eitangos.storage.base import SaveStatus, StorageError, UpsertResult, VocabularyStorage
from eitangos.storage.appwrite import AppwriteStorage, MockAppwriteStorage
from eitangos.storage.cursor import CursorStore, FileCursorStore, MemoryCursorStore

__all__ = [
    "SaveStatus",
    "StorageError",
    "UpsertResult",
    "VocabularyStorage",
    "AppwriteStorage",
    "MockAppwriteStorage",
    "CursorStore",
    "FileCursorStore",
    "MemoryCursorStore",
]
