"""Tests for smithy.loader: directory traversal and document classification."""

from pathlib import Path
from unittest.mock import patch

import pytest

from smithy.errors import BuildIOError, MetadataParseError, PathError
from smithy.loader import DocumentLoader, load_documents

from conftest import SAMPLE_WITH_FRONT_MATTER, write_tree


class TestDocumentLoader:
    def test_empty_directory(self, input_dir):
        assert DocumentLoader(input_dir).load() == []

    def test_single_file_with_front_matter(self, input_dir):
        write_tree(input_dir, {"doc.txt": SAMPLE_WITH_FRONT_MATTER})
        docs = DocumentLoader(input_dir).load()
        assert len(docs) == 1
        assert docs[0].path == Path("doc.txt")
        assert docs[0].metadata == {"title": "Foo"}
        assert docs[0].body == "Document body\n"

    def test_recurses_into_subdirectories(self, input_dir):
        write_tree(input_dir, {
            "top.txt": "top",
            "foo/bar.txt": "Document body",
            "foo/deeper/baz.txt": "baz",
        })
        docs = DocumentLoader(input_dir).load()
        paths = {d.path for d in docs}
        assert paths == {Path("top.txt"), Path("foo/bar.txt"), Path("foo/deeper/baz.txt")}

    def test_directories_are_not_documents(self, input_dir):
        (input_dir / "empty").mkdir()
        write_tree(input_dir, {"foo/bar.txt": "x"})
        docs = DocumentLoader(input_dir).load()
        assert [d.path for d in docs] == [Path("foo/bar.txt")]

    def test_paths_are_relative(self, input_dir):
        write_tree(input_dir, {"a/b/c.txt": "x"})
        doc = DocumentLoader(input_dir).load()[0]
        assert not doc.path.is_absolute()
        assert ".." not in doc.path.parts

    def test_plain_file_body_untouched(self, input_dir):
        content = "\n  leading and trailing whitespace  \n\n"
        write_tree(input_dir, {"plain.txt": content})
        doc = DocumentLoader(input_dir).load()[0]
        assert doc.metadata is None
        assert doc.body == content

    def test_crlf_preserved(self, input_dir):
        write_tree(input_dir, {"dos.txt": "line one\r\nline two\r\n"})
        doc = DocumentLoader(input_dir).load()[0]
        assert doc.body == "line one\r\nline two\r\n"

    def test_sorted_when_requested(self, input_dir):
        write_tree(input_dir, {"c.txt": "c", "a.txt": "a", "b/a.txt": "ba", "b.txt": "b"})
        docs = DocumentLoader(input_dir, sort=True).load()
        assert [d.path.as_posix() for d in docs] == ["a.txt", "b.txt", "b/a.txt", "c.txt"]

    def test_load_documents_wrapper(self, input_dir):
        write_tree(input_dir, {"x.txt": "x"})
        assert [d.body for d in load_documents(input_dir)] == ["x"]

    def test_accepts_str_path(self, input_dir):
        write_tree(input_dir, {"x.txt": "x"})
        assert len(DocumentLoader(str(input_dir)).load()) == 1


class TestDocumentLoaderErrors:
    def test_missing_input_dir(self, tmp_path):
        with pytest.raises(BuildIOError) as exc_info:
            DocumentLoader(tmp_path / "nope").load()
        assert exc_info.value.path == tmp_path / "nope"

    def test_invalid_utf8(self, input_dir):
        (input_dir / "binary.bin").write_bytes(b"\xff\xfe\x00bad")
        with pytest.raises(BuildIOError) as exc_info:
            DocumentLoader(input_dir).load()
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_unreadable_file(self, input_dir):
        write_tree(input_dir, {"doc.txt": "x"})
        with patch.object(Path, "read_bytes", side_effect=PermissionError("denied")):
            with pytest.raises(BuildIOError) as exc_info:
                DocumentLoader(input_dir).load()
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_traversal_error(self, input_dir):
        def _failing_walk(top, onerror=None):
            onerror(PermissionError(13, "denied", str(top)))
            yield from ()

        with patch("smithy.loader.walker.os.walk", side_effect=_failing_walk):
            with pytest.raises(BuildIOError, match="traverse"):
                DocumentLoader(input_dir).load()

    def test_file_outside_root(self, input_dir, tmp_path):
        outside = tmp_path / "elsewhere"
        outside.mkdir()
        (outside / "stray.txt").write_text("x")

        def _walk(top, onerror=None):
            yield str(outside), [], ["stray.txt"]

        with patch("smithy.loader.walker.os.walk", side_effect=_walk):
            with pytest.raises(PathError):
                DocumentLoader(input_dir).load()

    def test_malformed_front_matter_aborts(self, input_dir):
        write_tree(input_dir, {
            "good.txt": SAMPLE_WITH_FRONT_MATTER,
            "bad.txt": "---\ntitle: [unclosed\n---\nbody",
        })
        with pytest.raises(MetadataParseError) as exc_info:
            DocumentLoader(input_dir).load()
        assert exc_info.value.path == Path("bad.txt")


class TestDocumentLoaderSymlinks:
    def test_symlinked_directory_not_descended(self, input_dir, tmp_path):
        elsewhere = write_tree(tmp_path / "elsewhere", {"hidden.txt": "x", "deep/more.txt": "y"})
        write_tree(input_dir, {"real.txt": "r"})
        (input_dir / "linked").symlink_to(elsewhere, target_is_directory=True)

        docs = DocumentLoader(input_dir).load()

        assert [d.path for d in docs] == [Path("real.txt")]

    def test_symlinked_file_is_read(self, input_dir, tmp_path):
        target = tmp_path / "outside.txt"
        target.write_text("via link")
        (input_dir / "link.txt").symlink_to(target)

        docs = DocumentLoader(input_dir).load()

        assert [(d.path, d.body) for d in docs] == [(Path("link.txt"), "via link")]
