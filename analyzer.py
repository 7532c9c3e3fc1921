"""
Analyzer - the entry point the editor-protocol layer talks to.

Wires settings, the project registry and the lifecycle handler together.
Feature components (hover, completion, linting...) receive the analyzer and
use the query methods; they never mutate the registry themselves.
"""

from typing import Iterable, Optional

from config import AnalyzerSettings, load_settings
from models import Document, WorkspaceEdit
from repositories import ProjectIndex
from repositories.registry import ProjectRegistry
from workspace.lifecycle import LifecycleHandler, ReferenceRewriter
from workspace.paths import to_path


class Analyzer:
    """Project-aware document store for one editor session."""

    def __init__(
        self,
        settings: Optional[AnalyzerSettings] = None,
        rewriter: Optional[ReferenceRewriter] = None,
    ):
        self.settings = settings or load_settings()
        self.registry = ProjectRegistry(self.settings)
        self.lifecycle = LifecycleHandler(self.registry, rewriter)

    @property
    def dialect_path(self) -> Optional[str]:
        return self.settings.dialect_path

    def load_workspace(self, workspace_uri: str) -> None:
        """Scan the workspace at workspace_uri, replacing any loaded state."""
        self.registry.load_workspace(to_path(workspace_uri))

    # === Notifications ===

    def open_document(self, uri: str) -> None:
        self.lifecycle.open_document(uri)

    def document_did_change(self, uri: str, source: str) -> None:
        self.lifecycle.change_document(uri, source)

    def rename_files(self, renames: Iterable[tuple[str, str]]) -> WorkspaceEdit:
        return self.lifecycle.rename_files(renames)

    def did_delete_files(self, uris: Iterable[str]) -> None:
        self.lifecycle.delete_files(uris)

    # === Queries ===

    def get_document(self, path: str) -> Optional[Document]:
        return self.registry.resolve_document(path)

    def get_document_by_uri(self, uri: str) -> Optional[Document]:
        return self.registry.resolve_document_by_uri(uri)

    def get_project_by_document(self, document: Document) -> Optional[ProjectIndex]:
        return self.registry.resolve_owning_project(document)

    def get_project(self, root: Optional[str]) -> Optional[ProjectIndex]:
        return self.registry.find_project(root)

    def projects(self) -> list[ProjectIndex]:
        return self.registry.projects()

    def documents_of(self, project: ProjectIndex) -> set[Document]:
        return project.all_documents()
