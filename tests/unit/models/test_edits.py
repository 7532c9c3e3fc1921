"""Unit tests for edit set models."""

import pytest
from pydantic import ValidationError

from models import Position, Range, TextEdit, DocumentMove, WorkspaceEdit, DocumentRef


def _edit(line: int, text: str) -> TextEdit:
    return TextEdit(
        range=Range(start=Position(line=line, character=0), end=Position(line=line, character=4)),
        new_text=text,
    )


class TestWorkspaceEdit:
    """Test WorkspaceEdit model."""

    def test_create_empty(self):
        edit = WorkspaceEdit()
        assert edit.changes == {}
        assert edit.is_empty
        assert edit.edit_count() == 0

    def test_add_groups_by_uri(self):
        edit = WorkspaceEdit()
        edit.add("file:///ws/a.woo", _edit(0, "x"))
        edit.add("file:///ws/a.woo", _edit(1, "y"))
        edit.add("file:///ws/b.woo", _edit(0, "z"))

        assert len(edit.changes["file:///ws/a.woo"]) == 2
        assert edit.edit_count() == 3
        assert not edit.is_empty

    def test_merge_appends(self):
        first = WorkspaceEdit()
        first.add("file:///ws/a.woo", _edit(0, "x"))
        second = WorkspaceEdit()
        second.add("file:///ws/a.woo", _edit(3, "y"))

        merged = first.merge(second)

        assert merged is first
        assert [e.new_text for e in merged.changes["file:///ws/a.woo"]] == ["x", "y"]

    def test_from_collaborator_dict(self):
        """Collaborators may hand back plain dicts."""
        edit = WorkspaceEdit.model_validate({
            "changes": {
                "file:///ws/a.woo": [
                    {"range": {"start": {"line": 1, "character": 2}, "end": {"line": 1, "character": 9}},
                     "new_text": "p1/b.woo"}
                ]
            }
        })
        assert edit.changes["file:///ws/a.woo"][0].range.start.character == 2


class TestBoundaryModels:

    def test_position_rejects_negative(self):
        with pytest.raises(ValidationError):
            Position(line=-1, character=0)

    def test_document_move_is_hashable(self):
        moves = {DocumentMove(old_path="/ws/a.woo", new_path="/ws/p1/a.woo")}
        assert DocumentMove(old_path="/ws/a.woo", new_path="/ws/p1/a.woo") in moves

    def test_document_ref_catch_all(self):
        assert DocumentRef(path="/ws/loose.woo").in_catch_all
        assert not DocumentRef(project_root="/ws/p1", path="/ws/p1/a.woo").in_catch_all

    def test_document_ref_is_frozen(self):
        ref = DocumentRef(project_root="/ws/p1", path="/ws/p1/a.woo")
        with pytest.raises(ValidationError):
            ref.path = "/ws/p1/b.woo"
