"""Unit tests for Document model."""

from models import Document


class TestDocument:
    """Test Document model."""

    def test_create_minimal(self):
        doc = Document(path="/ws/a.woo")
        assert doc.path == "/ws/a.woo"
        assert doc.source == ""
        assert doc.version == 0
        assert doc.analysis == {}

    def test_name(self):
        assert Document(path="/ws/p1/intro.woo").name == "intro.woo"

    def test_update_source_replaces_wholesale(self):
        doc = Document(path="/ws/a.woo", source="old text")
        doc.update_source("new")
        assert doc.source == "new"
        assert doc.version == 1

    def test_update_source_leaves_analysis_alone(self):
        doc = Document(path="/ws/a.woo")
        doc.analysis["outline"] = ["h1"]
        doc.update_source("changed")
        assert doc.analysis == {"outline": ["h1"]}

    def test_equality_is_identity(self):
        """Two objects for the same path are still different documents."""
        a = Document(path="/ws/a.woo", source="x")
        b = Document(path="/ws/a.woo", source="x")
        assert a != b
        assert a == a

    def test_hash_survives_rename(self):
        doc = Document(path="/ws/a.woo")
        docs = {doc}
        doc.path = "/ws/b.woo"
        assert doc in docs

    def test_load_reads_source(self, tmp_path):
        target = tmp_path / "a.woo"
        target.write_text("hello")
        doc = Document.load(str(target))
        assert doc.source == "hello"
        assert doc.path == str(target)

    def test_load_missing_file_is_empty(self, tmp_path):
        doc = Document.load(str(tmp_path / "unsaved.woo"))
        assert doc.source == ""
