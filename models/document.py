"""
Document - one tracked .woo source file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(eq=False)
class Document:
    """
    A source file tracked by the core.

    Equality and hashing are by object identity: the same Document survives
    a rename even though its path changes. Lookups always go by path.
    """
    path: str
    source: str = ""
    version: int = 0
    analysis: dict = field(default_factory=dict)  # Collaborator-owned, opaque here

    @classmethod
    def load(cls, path: str, encoding: str = "utf-8") -> "Document":
        """
        Read a document from disk.

        A missing file gives an empty document - the editor may open a
        buffer that was never saved. Any other OSError propagates.
        """
        try:
            source = Path(path).read_text(encoding=encoding, errors="replace")
        except FileNotFoundError:
            source = ""
        return cls(path=path, source=source)

    @property
    def name(self) -> str:
        return os.path.basename(self.path)

    def update_source(self, source: str) -> None:
        """Replace the in-memory text wholesale."""
        self.source = source
        self.version += 1
