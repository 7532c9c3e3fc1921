"""
Stable identifiers handed across the registry boundary.
"""

from typing import Optional

from .base import FrozenSchema


class DocumentRef(FrozenSchema):
    """
    Names a document by (project root, path) instead of by object.

    project_root is None for the catch-all project. A ref goes stale when the
    document is renamed or moved; resolve it again through the registry.
    """
    project_root: Optional[str] = None
    path: str

    @property
    def in_catch_all(self) -> bool:
        return self.project_root is None
