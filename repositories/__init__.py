"""
Repository layer - in-memory ownership of documents by project.

Usage:
    from repositories import ProjectIndex
    from repositories.registry import ProjectRegistry

    registry = ProjectRegistry(settings)
    registry.load_workspace("/path/to/workspace")
    document = registry.resolve_document("/path/to/workspace/intro.woo")

The registry is imported from its own module: it depends on the workspace
loader, which in turn builds ProjectIndex instances.
"""

from .base import BaseRepository
from .project_index import ProjectIndex

__all__ = ["BaseRepository", "ProjectIndex"]
