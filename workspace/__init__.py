"""
Workspace layer - path resolution, loading and lifecycle events.

Usage:
    from workspace.paths import to_path, find_enclosing_project_root
    from workspace.lifecycle import LifecycleHandler

Only the leaf modules are re-exported here; loader and lifecycle depend on
the repositories package and are imported from their own modules.
"""

from .errors import WooWooError, InvalidUriError, WorkspaceLoadError, RegistryInvariantError
from .paths import (
    normalize_path,
    to_path,
    to_uri,
    is_document_path,
    is_marker_path,
    find_enclosing_project_root,
)

__all__ = [
    "WooWooError",
    "InvalidUriError",
    "WorkspaceLoadError",
    "RegistryInvariantError",
    "normalize_path",
    "to_path",
    "to_uri",
    "is_document_path",
    "is_marker_path",
    "find_enclosing_project_root",
]
