"""
Integration test fixtures.

Integration tests:
- Build real workspaces in temp directories
- Drive the registry and lifecycle handler end to end
- Should be deterministic
"""

import pytest
import tempfile
import shutil
from pathlib import Path

from repositories.registry import ProjectRegistry
from workspace.lifecycle import LifecycleHandler
from workspace.paths import normalize_path, to_uri


@pytest.fixture
def temp_dir():
    """Temporary directory for test data."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def make_workspace(temp_dir):
    """
    Write a workspace from a {relative path: content} dict.

    Returns a helper with .root (normalized), .path(rel) and .uri(rel).
    """
    class Workspace:
        def __init__(self, base: Path):
            self.base = base
            self.root = normalize_path(base)

        def path(self, rel: str = "") -> str:
            return normalize_path(self.base / rel) if rel else self.root

        def uri(self, rel: str = "") -> str:
            return to_uri(self.path(rel))

        def write(self, rel: str, content: str = "") -> str:
            target = self.base / rel
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
            return self.path(rel)

        def move(self, old_rel: str, new_rel: str) -> None:
            target = self.base / new_rel
            target.parent.mkdir(parents=True, exist_ok=True)
            (self.base / old_rel).rename(target)

    def make(files: dict) -> Workspace:
        ws = Workspace(temp_dir / "ws")
        ws.base.mkdir(parents=True, exist_ok=True)
        for rel, content in files.items():
            ws.write(rel, content)
        return ws

    return make


@pytest.fixture
def scenario_workspace(make_workspace):
    """/ws/p1/Woofile, /ws/p1/a.woo, /ws/loose.woo"""
    return make_workspace({
        "p1/Woofile": "",
        "p1/a.woo": "a content",
        "loose.woo": "loose content",
    })


@pytest.fixture
def registry(quiet_settings):
    return ProjectRegistry(quiet_settings)


@pytest.fixture
def handler(registry):
    return LifecycleHandler(registry)
