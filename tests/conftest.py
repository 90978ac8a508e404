"""Shared test fixtures for Smithy."""

from pathlib import Path

import pytest

from smithy.config.models import SmithyConfig
from smithy.document import Document

SAMPLE_WITH_FRONT_MATTER = "---\ntitle: Foo\n---\n\nDocument body"


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` ({relative path: content}) under root."""
    root.mkdir(parents=True, exist_ok=True)
    for rel, content in files.items():
        dest = root / rel
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_bytes(content.encode("utf-8"))
    return root


@pytest.fixture
def input_dir(tmp_path):
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path):
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def sample_documents():
    return [
        Document(path=Path("a.txt"), metadata={"title": "Alpha"}, body="alpha\n"),
        Document(path=Path("nested/b.txt"), metadata=None, body="bravo"),
        Document(path=Path("c.md"), metadata={"tags": ["x"]}, body="charlie\n"),
    ]


@pytest.fixture
def sample_config():
    return SmithyConfig()
