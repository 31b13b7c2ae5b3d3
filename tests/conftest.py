"""Common test fixtures and configuration."""

import json
import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docviewer.core.config import Settings
from docviewer.main import create_app


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def doc_tree(temp_dir):
    """Create a document tree below ``temp_dir/root``.

    A file outside the root (``temp_dir/secret.md``) is created as a
    traversal target.
    """
    root = temp_dir / "root"
    write(root / "README.md", "# Readme\n")
    write(
        root / "config.json",
        json.dumps(
            {
                "a": {"b": [1, 2, 3]},
                "servers": [{"name": "alpha"}, {"name": "beta"}],
                "flag": True,
            }
        ),
    )
    write(root / "notes.txt", "plain text")
    write(root / ".hidden.md", "hidden")
    write(root / "docs" / "guide.md", "# Guide\n")
    write(root / "docs" / "data.json", '{"items": ["x", "y"]}')
    write(root / "docs" / "nested" / "deep.md", "deep")
    write(root / "deep_only" / "inner" / "buried.md", "buried")
    write(root / "node_modules" / "pkg.md", "dependency")
    write(root / "build" / "out.md", "build output")
    write(root / "dist" / "bundle.json", "{}")
    write(root / "broken.json", "{not json")
    write(temp_dir / "secret.md", "outside the root")
    return root


@pytest.fixture
def settings(doc_tree, temp_dir):
    """Settings rooted at the document tree, without a front end build."""
    return Settings(
        root_directory=str(doc_tree),
        static_dir=str(temp_dir / "no-frontend"),
    )


@pytest.fixture
def client(settings):
    """Create a test client for the FastAPI app."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
