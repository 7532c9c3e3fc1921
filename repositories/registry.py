"""
ProjectRegistry - every project of the loaded workspace.

The registry is the only owner of documents. Collaborators query it per
request; the lifecycle handler mutates it. All public methods hold one
re-entrant lock, so a rename's path change and re-key are never observed
half-done.
"""

import sys
import threading
from typing import Optional, Union

from config import AnalyzerSettings
from models import Document, DocumentRef
from workspace.errors import RegistryInvariantError
from workspace.loader import WorkspaceLoader
from workspace.paths import normalize_path, to_path, find_enclosing_project_root, iter_ancestors, is_within
from .project_index import ProjectIndex

# Key of the catch-all project
CATCH_ALL = None


class ProjectRegistry:
    """
    Owns one ProjectIndex per project root plus the catch-all index.

    Before any workspace is loaded the registry holds just an empty
    catch-all, so documents opened early still have a home.
    """

    def __init__(self, settings: Optional[AnalyzerSettings] = None):
        self.settings = settings or AnalyzerSettings()
        self._lock = threading.RLock()
        self._workspace_root: Optional[str] = None
        self._projects: dict[Optional[str], ProjectIndex] = {CATCH_ALL: ProjectIndex()}

    def __repr__(self) -> str:
        return f"ProjectRegistry({self._workspace_root}, {len(self._projects)} projects)"

    def _log(self, message: str) -> None:
        if self.settings.verbose:
            print(f"[REGISTRY] {message}", file=sys.stderr)

    def lock(self):
        """
        The registry's re-entrant lock.

        Hold it to run several operations as one, e.g. a lookup followed by
        a move:

            with registry.lock():
                document = registry.resolve_document(path)
                registry.move_document(document, new_path)
        """
        return self._lock

    # === Workspace ===

    @property
    def workspace_root(self) -> Optional[str]:
        return self._workspace_root

    def load_workspace(self, workspace_root: str) -> None:
        """
        Replace all state with a fresh scan of workspace_root.

        On WorkspaceLoadError nothing is published and the previous state
        stays as it was.
        """
        root = normalize_path(workspace_root)
        projects = WorkspaceLoader(self.settings).load(root)

        with self._lock:
            self._workspace_root = root
            self._projects = projects

    # === Projects ===

    @property
    def catch_all(self) -> ProjectIndex:
        with self._lock:
            return self._projects[CATCH_ALL]

    def projects(self) -> list[ProjectIndex]:
        """All projects, real roots sorted by path, catch-all last."""
        with self._lock:
            roots = sorted(r for r in self._projects if r is not None)
            return [self._projects[r] for r in roots] + [self._projects[CATCH_ALL]]

    def find_project(self, root: Optional[str]) -> Optional[ProjectIndex]:
        """Exact match by root path; None selects the catch-all."""
        with self._lock:
            if root is None:
                return self._projects[CATCH_ALL]
            return self._projects.get(normalize_path(root))

    def project_for_path(self, path: str) -> ProjectIndex:
        """
        The project a document at path would belong to right now.

        Uses the Woofiles on disk, and falls back to the catch-all when the
        nearest root is not a registered project (created after the load).
        """
        with self._lock:
            root = find_enclosing_project_root(normalize_path(path), self._workspace_root)
            project = self._projects.get(root) if root is not None else None
            return project if project is not None else self._projects[CATCH_ALL]

    def remove_project(self, root: str) -> list[Document]:
        """
        Dissolve the project at root.

        Its documents move to the nearest surviving registered project above
        them, or to the catch-all. Returns the moved documents. The catch-all
        can't be removed; an unknown root is a no-op.
        """
        with self._lock:
            project = self._projects.pop(normalize_path(root), None) if root is not None else None
            if project is None:
                return []

            orphans = project.list()
            for document in orphans:
                self._nearest_registered(document.path).insert(document)

            self._log(f"Dissolved project {project.root}, reassigned {len(orphans)} documents")
            return orphans

    def _nearest_registered(self, path: str) -> ProjectIndex:
        for directory in iter_ancestors(path, self._workspace_root):
            if directory in self._projects:
                return self._projects[directory]
        return self._projects[CATCH_ALL]

    # === Documents ===

    def documents(self) -> list[Document]:
        """Every tracked document across all projects."""
        with self._lock:
            return [doc for project in self.projects() for doc in project.list()]

    def resolve_document(self, path: str) -> Optional[Document]:
        """First document at path in any project (there is at most one)."""
        path = normalize_path(path)
        with self._lock:
            for project in self._projects.values():
                document = project.get(path)
                if document is not None:
                    return document
            return None

    def resolve_document_by_uri(self, uri: str) -> Optional[Document]:
        return self.resolve_document(to_path(uri))

    def resolve_owning_project(self, document: Document) -> Optional[ProjectIndex]:
        """Project whose index holds document's current path."""
        with self._lock:
            for project in self._projects.values():
                if project.contains(document):
                    return project
            return None

    def ref_for(self, document: Document) -> Optional[DocumentRef]:
        """Stable (project root, path) identifier for a tracked document."""
        with self._lock:
            project = self.resolve_owning_project(document)
            return project.ref(document) if project is not None else None

    def resolve_ref(self, ref: DocumentRef) -> Optional[Document]:
        with self._lock:
            project = self._projects.get(ref.project_root)
            return project.get(ref.path) if project is not None else None

    def load_document(self, path: str) -> Document:
        """
        Read path from disk into the project it belongs to.

        Replaces any document already indexed at path.
        """
        path = normalize_path(path)
        with self._lock:
            document = Document.load(path, encoding=self.settings.encoding)
            self.delete_document(path)
            self.project_for_path(path).insert(document)
            return document

    def move_document(self, document: Document, new_path: str) -> Optional[ProjectIndex]:
        """
        Rename document to new_path and re-home it.

        The new owner may be the same project, another project or the
        catch-all. Returns the new owner, or None when document is no longer
        tracked (it was deleted meanwhile) and nothing moved.
        """
        new_path = normalize_path(new_path)
        with self._lock:
            old_project = self.resolve_owning_project(document)
            if old_project is None or old_project.get(document.path) is not document:
                return None

            new_project = self.project_for_path(new_path)
            old_project.remove(document.path)
            # Whatever sat at new_path is overwritten, wherever it was indexed
            self.delete_document(new_path)
            document.path = new_path
            new_project.insert(document)
            return new_project

    def delete_document(self, target: Union[str, Document]) -> Optional[Document]:
        """Remove the document at a path (or a document) from its owner."""
        with self._lock:
            path = target.path if isinstance(target, Document) else normalize_path(target)
            for project in self._projects.values():
                removed = project.remove(path)
                if removed is not None:
                    return removed
            return None

    def delete_tree(self, directory: str) -> list[Document]:
        """
        Remove every document at or below directory. Returns them.

        Projects rooted inside directory go too, since their Woofiles went
        with it.
        """
        directory = normalize_path(directory)
        with self._lock:
            removed = []
            for project in self._projects.values():
                for path in project.paths():
                    if is_within(path, directory):
                        removed.append(project.remove(path))

            for root in [r for r in self._projects if r is not None and is_within(r, directory)]:
                del self._projects[root]
                self._log(f"Dropped project {root} with its directory")
            return removed

    # === Consistency ===

    def check_invariants(self) -> None:
        """
        Raise RegistryInvariantError if membership is inconsistent.

        Checks: exactly one catch-all, every key equals its document's path,
        no document (by identity or by path) in two projects.
        """
        with self._lock:
            catch_alls = [p for p in self._projects.values() if p.is_catch_all]
            if len(catch_alls) != 1:
                raise RegistryInvariantError(f"expected one catch-all project, found {len(catch_alls)}")

            seen_paths: dict[str, Optional[str]] = {}
            seen_ids: set[int] = set()
            for key, project in self._projects.items():
                if key != project.root:
                    raise RegistryInvariantError(f"project {project.root} registered under {key}")
                for path, document in project.items():
                    if path != document.path:
                        raise RegistryInvariantError(f"{document.path} indexed under stale key {path}")
                    if path in seen_paths:
                        raise RegistryInvariantError(
                            f"{path} owned by both {seen_paths[path]} and {project.root}"
                        )
                    if id(document) in seen_ids:
                        raise RegistryInvariantError(f"document {path} indexed twice")
                    seen_paths[path] = project.root
                    seen_ids.add(id(document))
