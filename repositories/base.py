"""
Repository base classes - define the interface.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, Optional

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Abstract base for path-keyed stores."""

    @abstractmethod
    def get(self, path: str) -> Optional[T]:
        """Get entry by exact path."""
        pass

    @abstractmethod
    def insert(self, entity: T) -> None:
        """Insert entry under its own key. Overwrites (last write wins)."""
        pass

    @abstractmethod
    def remove(self, path: str) -> Optional[T]:
        """Remove entry by path. Returns it, or None if absent."""
        pass

    @abstractmethod
    def list(self) -> list[T]:
        """List all entries."""
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Check if an entry exists at path."""
        pass
