"""
Lifecycle handler - applies editor notifications to the registry.

Four events: open, change, rename (batched) and delete. None of them treats
a missing document or project as an error; they fall back to the catch-all
project or do nothing. Each event runs under the registry lock, so no other
operation lands between its lookups and its mutations.
"""

import os
import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from models import DocumentMove, WorkspaceEdit
from repositories.registry import ProjectRegistry
from .paths import to_path, is_document_path, is_marker_path


class ReferenceRewriter(ABC):
    """
    External collaborator that rewrites cross-document references.

    Called once per rename batch with every document move in it.
    """

    @abstractmethod
    def refactor_document_references(self, moves: list[DocumentMove]) -> WorkspaceEdit:
        """Return the edits that keep references valid after moves."""
        pass


class LifecycleHandler:
    """
    Mutates a ProjectRegistry in response to editor notifications.

    Usage:
        handler = LifecycleHandler(registry, rewriter)
        handler.open_document("file:///ws/p1/a.woo")
        edit = handler.rename_files([(old_uri, new_uri)])
    """

    def __init__(self, registry: ProjectRegistry, rewriter: Optional[ReferenceRewriter] = None):
        self.registry = registry
        self.rewriter = rewriter

    def _log(self, message: str) -> None:
        if self.registry.settings.verbose:
            print(f"[LIFECYCLE] {message}", file=sys.stderr)

    def open_document(self, uri: str) -> None:
        """Start tracking uri unless it is already tracked."""
        path = to_path(uri)
        with self.registry.lock():
            if self.registry.resolve_document(path) is not None:
                return
            self.registry.load_document(path)

    def change_document(self, uri: str, source: str) -> None:
        """Replace the document's text. Unknown URIs are ignored."""
        path = to_path(uri)
        with self.registry.lock():
            document = self.registry.resolve_document(path)
            if document is not None:
                document.update_source(source)

    def rename_files(self, renames: Iterable[tuple[str, str]]) -> WorkspaceEdit:
        """
        Apply a batch of (old_uri, new_uri) renames.

        - .woo -> .woo: move the document, possibly to another project
        - .woo -> anything else: stop tracking the document
        - anything else: nothing here; a later open picks the file up

        Returns the reference rewriter's edits for the moved documents (empty
        without a rewriter or without moves). A malformed URI anywhere in the
        batch rejects the whole batch before anything moves.
        """
        pairs = [(to_path(old_uri), to_path(new_uri)) for old_uri, new_uri in renames]
        moves: list[DocumentMove] = []

        with self.registry.lock():
            for old_path, new_path in pairs:
                if is_document_path(old_path) and is_document_path(new_path):
                    document = self.registry.resolve_document(old_path)
                    if document is None or self.registry.move_document(document, new_path) is None:
                        self._log(f"Rename of untracked {old_path} ignored")
                        continue
                    moves.append(DocumentMove(old_path=old_path, new_path=new_path))

                elif is_document_path(old_path):
                    self.registry.delete_document(old_path)

        if not moves or self.rewriter is None:
            return WorkspaceEdit()
        return self.rewriter.refactor_document_references(moves)

    def delete_files(self, uris: Iterable[str]) -> None:
        """
        Stop tracking deleted files.

        A deleted Woofile dissolves its project; a deleted directory drops
        every document below it. Unknown URIs are no-ops.
        """
        paths = [to_path(uri) for uri in uris]

        with self.registry.lock():
            for path in paths:
                if self.registry.delete_document(path) is not None:
                    continue

                if is_marker_path(path):
                    self.registry.remove_project(os.path.dirname(path))
                    continue

                removed = self.registry.delete_tree(path)
                if removed:
                    self._log(f"Deleted directory {path}, dropped {len(removed)} documents")
