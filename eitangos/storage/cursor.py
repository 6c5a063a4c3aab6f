"""
Cursor persistence.

The cursor is the id of the last processed post. The monitor loads it
before each poll and saves it after each processed post.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from eitangos.config import LAST_POST_ID_FILE


class CursorStore(ABC):
    """Abstract store for a single cursor value."""
    
    @abstractmethod
    def load(self) -> Optional[str]:
        """Return the saved cursor, or None if nothing was saved."""
        pass
    
    @abstractmethod
    def save(self, cursor: str) -> None:
        """Persist `cursor`, replacing the previous value."""
        pass
    
    def clear(self) -> None:
        """Forget the saved cursor."""
        pass


class FileCursorStore(CursorStore):
    """
    Keeps the cursor in a small text file.
    
    Read and write errors are reported, not raised: a lost cursor means
    the next poll re-reads the latest page, and the duplicate check in
    storage keeps that harmless.
    """
    
    def __init__(self, path: Union[str, Path] = None):
        self.path = Path(path if path is not None else LAST_POST_ID_FILE)
    
    def load(self) -> Optional[str]:
        try:
            if self.path.exists():
                value = self.path.read_text(encoding="utf-8").strip()
                return value or None
        except OSError as e:
            print(f"[cursor] Error reading {self.path}: {e}")
        return None
    
    def save(self, cursor: str) -> None:
        try:
            self.path.write_text(str(cursor), encoding="utf-8")
        except OSError as e:
            print(f"[cursor] Error saving {self.path}: {e}")
    
    def clear(self) -> None:
        try:
            if self.path.exists():
                self.path.unlink()
        except OSError as e:
            print(f"[cursor] Error removing {self.path}: {e}")
    
    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} path={str(self.path)!r}>"


class MemoryCursorStore(CursorStore):
    """Cursor held in memory; used for dry runs and tests."""
    
    def __init__(self, cursor: Optional[str] = None):
        self._cursor = cursor
    
    def load(self) -> Optional[str]:
        return self._cursor
    
    def save(self, cursor: str) -> None:
        self._cursor = cursor
    
    def clear(self) -> None:
        self._cursor = None
