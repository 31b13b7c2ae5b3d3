"""Unit tests for document content."""

from pathlib import Path

import pytest

from docviewer.core.content import content_type_for, load_json_document, read_content
from docviewer.core.errors import BadRequestError, NotFoundError


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.json", "application/json"),
        ("A.JSON", "application/json"),
        ("a.md", "text/plain"),
        ("a.bin", "application/octet-stream"),
    ],
)
def test_content_type_for(name, expected):
    assert content_type_for(Path(name)) == expected


def test_read_markdown_unmodified(doc_tree, settings):
    data, content_type = read_content(doc_tree / "README.md", settings)
    assert data == b"# Readme\n"
    assert content_type == "text/plain"


def test_read_json_unmodified(doc_tree, settings):
    data, content_type = read_content(doc_tree / "broken.json", settings)
    assert data == b"{not json"
    assert content_type == "application/json"


def test_read_disallowed_extension(doc_tree, settings):
    with pytest.raises(BadRequestError) as exc_info:
        read_content(doc_tree / "notes.txt", settings)
    assert exc_info.value.message == "Unsupported file type: .txt"


def test_read_directory(doc_tree, settings):
    with pytest.raises(BadRequestError):
        read_content(doc_tree / "docs", settings)


def test_read_missing(doc_tree, settings):
    with pytest.raises(NotFoundError):
        read_content(doc_tree / "missing.md", settings)


def test_load_json_document(doc_tree):
    assert load_json_document(doc_tree / "docs" / "data.json") == {"items": ["x", "y"]}


def test_load_json_rejects_other_extensions(doc_tree):
    with pytest.raises(BadRequestError) as exc_info:
        load_json_document(doc_tree / "README.md")
    assert exc_info.value.message == "File is not JSON"


def test_load_json_rejects_malformed(doc_tree):
    with pytest.raises(BadRequestError) as exc_info:
        load_json_document(doc_tree / "broken.json")
    assert exc_info.value.message.startswith("Invalid JSON")


def test_load_json_rejects_nan(temp_dir):
    (temp_dir / "nan.json").write_text('{"value": NaN}')
    with pytest.raises(BadRequestError):
        load_json_document(temp_dir / "nan.json")


def test_load_json_rejects_directory(temp_dir):
    (temp_dir / "folder.json").mkdir()
    with pytest.raises(BadRequestError) as exc_info:
        load_json_document(temp_dir / "folder.json")
    assert exc_info.value.message == "Cannot query directory"
