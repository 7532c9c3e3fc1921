"""
Domain models - single source of truth for everything the core hands out.

Design principles:
- Documents are plain mutable objects, compared by identity
- Boundary types (edits, refs) are validated pydantic models
- No model knows about projects or the filesystem layout
"""

from .base import BaseSchema, FrozenSchema
from .document import Document
from .edits import Position, Range, TextEdit, DocumentMove, WorkspaceEdit
from .refs import DocumentRef

__all__ = [
    # Base
    "BaseSchema",
    "FrozenSchema",
    # Document
    "Document",
    # Edits
    "Position",
    "Range",
    "TextEdit",
    "DocumentMove",
    "WorkspaceEdit",
    # Refs
    "DocumentRef",
]
