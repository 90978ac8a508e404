"""DocumentLoader: walks an input tree and turns every file into a Document."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from smithy.document import Document, parse_document
from smithy.errors import BuildIOError, PathError

logger = logging.getLogger(__name__)


def _raise_walk_error(exc: OSError) -> None:
    raise BuildIOError("Could not traverse input dir", exc.filename, exc) from exc


class DocumentLoader:
    """Reads every regular file under ``input_path`` into a Document.

    Files are yielded in the order the filesystem enumerates them unless
    ``sort`` is set, in which case the result is ordered by relative path.
    Nothing is ever written.
    """

    def __init__(self, input_path: str | Path, *, sort: bool = False) -> None:
        self.input_path = Path(input_path)
        self.sort = sort

    def load(self) -> list[Document]:
        if not self.input_path.is_dir():
            raise BuildIOError("Input path is not a directory", self.input_path)

        documents = [self._load_file(path) for path in self._iter_files()]
        if self.sort:
            documents.sort(key=lambda doc: doc.path.as_posix())

        logger.info("loaded %d documents from %s", len(documents), self.input_path)
        return documents

    # -- internals ---------------------------------------------------------

    def _iter_files(self):
        for dirpath, _dirnames, filenames in os.walk(self.input_path, onerror=_raise_walk_error):
            for filename in filenames:
                yield Path(dirpath) / filename

    def _relative_path(self, path: Path) -> Path:
        try:
            rel = path.relative_to(self.input_path)
        except ValueError as exc:
            raise PathError(path, self.input_path, exc) from exc
        if rel.is_absolute() or ".." in rel.parts:
            raise PathError(path, self.input_path)
        return rel

    def _load_file(self, path: Path) -> Document:
        logger.info("processing %s", path)
        try:
            text = path.read_bytes().decode("utf-8")
        except OSError as exc:
            raise BuildIOError("Encountered an IO error", path, exc) from exc
        except UnicodeDecodeError as exc:
            raise BuildIOError("File is not valid UTF-8", path, exc) from exc

        return parse_document(self._relative_path(path), text)


def load_documents(input_path: str | Path, *, sort: bool = False) -> list[Document]:
    """Convenience wrapper around DocumentLoader(input_path).load()."""
    return DocumentLoader(input_path, sort=sort).load()
