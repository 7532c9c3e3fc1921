"""
Edit set models - what the reference rewriter hands back after a rename.

Shapes follow the editor protocol (0-based lines and characters) so the
editor layer can forward them without translation.
"""

from pydantic import Field

from .base import BaseSchema, FrozenSchema


class Position(FrozenSchema):
    line: int = Field(ge=0)
    character: int = Field(ge=0)


class Range(FrozenSchema):
    start: Position
    end: Position


class TextEdit(BaseSchema):
    """Replace the text in range with new_text."""
    range: Range
    new_text: str = ""


class DocumentMove(FrozenSchema):
    """A document that moved from old_path to new_path during a rename batch."""
    old_path: str
    new_path: str


class WorkspaceEdit(BaseSchema):
    """
    Textual changes across documents, keyed by document URI.
    """
    changes: dict[str, list[TextEdit]] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not any(self.changes.values())

    def add(self, uri: str, edit: TextEdit) -> None:
        self.changes.setdefault(uri, []).append(edit)

    def merge(self, other: "WorkspaceEdit") -> "WorkspaceEdit":
        """Append other's edits to this edit set. Returns self for chaining."""
        for uri, edits in other.changes.items():
            for edit in edits:
                self.add(uri, edit)
        return self

    def edit_count(self) -> int:
        return sum(len(edits) for edits in self.changes.values())
