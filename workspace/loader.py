"""
Workspace loader - one-shot scan that builds every project index.

Single pass:
1. Walk the workspace once, collecting Woofile directories and .woo files
2. One index per discovered root, plus exactly one catch-all index
3. Each document goes to its nearest discovered root (or the catch-all)

Nested roots never double-register a document: the outer root's subtree is
not scanned separately, assignment is decided per document.
"""

import os
import sys
from dataclasses import dataclass, field
from typing import Optional

from config import AnalyzerSettings, MARKER_FILENAME
from models import Document
from repositories.project_index import ProjectIndex
from .errors import WorkspaceLoadError
from .paths import normalize_path, is_document_path, iter_ancestors


@dataclass
class WorkspaceScan:
    """Raw result of walking a workspace, before any document is read."""
    workspace_root: str
    project_roots: list[str] = field(default_factory=list)
    document_paths: list[str] = field(default_factory=list)


class WorkspaceLoader:
    """
    Scans a workspace root and returns its project indices.

    Usage:
        indices = WorkspaceLoader(settings).load("/path/to/ws")
        catch_all = indices[None]
    """

    def __init__(self, settings: Optional[AnalyzerSettings] = None):
        self.settings = settings or AnalyzerSettings()

    def load(self, workspace_root: str) -> dict[Optional[str], ProjectIndex]:
        """
        Build the project indices for workspace_root.

        Returns a dict keyed by project root, with None for the catch-all.

        Raises:
            WorkspaceLoadError: root missing or unreadable, or any I/O error
                while walking or reading documents
        """
        root = normalize_path(workspace_root)
        scan = self.scan(root)

        indices: dict[Optional[str], ProjectIndex] = {None: ProjectIndex()}
        for project_root in scan.project_roots:
            indices[project_root] = ProjectIndex(project_root)

        known_roots = set(scan.project_roots)
        for path in scan.document_paths:
            owner = self.nearest_root(path, root, known_roots)
            try:
                document = Document.load(path, encoding=self.settings.encoding)
            except OSError as e:
                raise WorkspaceLoadError(root, f"cannot read {path}: {e}") from e
            indices[owner].insert(document)

        if self.settings.verbose:
            print(
                f"[WORKSPACE] Loaded {root}: {len(scan.project_roots)} projects, "
                f"{len(scan.document_paths)} documents "
                f"({len(indices[None])} outside any project)",
                file=sys.stderr,
            )
        return indices

    def scan(self, root: str) -> WorkspaceScan:
        """Walk root once, collecting project roots and document paths."""
        if not os.path.isdir(root):
            raise WorkspaceLoadError(root, "not a directory")

        scan = WorkspaceScan(workspace_root=root)
        exclude_dirs = set(self.settings.exclude_dirs or [])
        visited: set[str] = set()

        def on_error(err: OSError) -> None:
            raise WorkspaceLoadError(root, f"cannot scan {err.filename}: {err.strerror or err}") from err

        for dirpath, dirnames, filenames in os.walk(
            root, onerror=on_error, followlinks=self.settings.follow_symlinks
        ):
            # prune excluded dirs (in-place); sorted for a deterministic walk
            dirnames[:] = sorted(d for d in dirnames if d not in exclude_dirs)
            directory = normalize_path(dirpath)

            if self.settings.follow_symlinks:
                real = os.path.realpath(dirpath)
                if real in visited:
                    raise WorkspaceLoadError(root, f"{directory} reached twice through symlinks")
                visited.add(real)

            for fn in sorted(filenames):
                # regular files only; a dangling symlink is skipped
                if not os.path.isfile(os.path.join(dirpath, fn)):
                    continue
                if fn == MARKER_FILENAME:
                    scan.project_roots.append(directory)
                elif is_document_path(fn):
                    scan.document_paths.append(f"{directory.rstrip('/')}/{fn}")

        return scan

    @staticmethod
    def nearest_root(path: str, workspace_root: str, known_roots: set[str]) -> Optional[str]:
        """Deepest known root above path, or None for the catch-all."""
        for directory in iter_ancestors(path, workspace_root):
            if directory in known_roots:
                return directory
        return None
