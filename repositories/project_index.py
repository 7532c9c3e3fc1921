"""
ProjectIndex - the documents owned by exactly one project.

Directory semantics:
    root=None        - the catch-all project (documents outside every root)
    root="/ws/p1"    - the project whose Woofile sits in /ws/p1
"""

from typing import Optional

from models import Document, DocumentRef
from .base import BaseRepository


class ProjectIndex(BaseRepository[Document]):
    """
    Ordered path -> Document map for one project.

    Keys are always the owning document's current path. Whoever changes a
    document's path must re-key it here (or move it to another index).
    """

    def __init__(self, root: Optional[str] = None):
        self.root = root
        self._documents: dict[str, Document] = {}

    def __repr__(self) -> str:
        label = self.root if self.root is not None else "<catch-all>"
        return f"ProjectIndex({label}, {len(self._documents)} documents)"

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, path: str) -> bool:
        return path in self._documents

    @property
    def is_catch_all(self) -> bool:
        return self.root is None

    def get(self, path: str) -> Optional[Document]:
        return self._documents.get(path)

    def insert(self, entity: Document) -> None:
        self._documents[entity.path] = entity

    def remove(self, path: str) -> Optional[Document]:
        return self._documents.pop(path, None)

    def exists(self, path: str) -> bool:
        return path in self._documents

    def paths(self) -> list[str]:
        """Owned paths, sorted."""
        return sorted(self._documents)

    def all_documents(self) -> set[Document]:
        """Snapshot of every owned document."""
        return set(self._documents.values())

    def items(self) -> list[tuple[str, Document]]:
        """Snapshot of (key, document) pairs, in key order."""
        return sorted(self._documents.items())

    def contains(self, document: Document) -> bool:
        """
        True if this index holds a document at document's current path.

        Compared by path, not identity: collaborators may hold a stale
        object for the same file.
        """
        return document.path in self._documents

    def ref(self, document: Document) -> DocumentRef:
        return DocumentRef(project_root=self.root, path=document.path)

    # Defined last: the name shadows the builtin for the rest of the class body
    def list(self) -> list[Document]:
        return [self._documents[p] for p in self.paths()]
