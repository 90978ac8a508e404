"""DocumentWriter: materializes the final document collection on disk."""

from __future__ import annotations

import logging
import shutil
import uuid
from pathlib import Path

from smithy.document import Document
from smithy.errors import BuildIOError, PathError

logger = logging.getLogger(__name__)


def _clear_directory(path: Path) -> None:
    """Remove ``path`` and everything under it. A missing path is a no-op."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise BuildIOError("Could not clear output dir", path, exc) from exc


class DocumentWriter:
    """Writes Documents under ``output_path``, replacing whatever was there.

    By default the existing tree is removed first and files are written in
    collection order, so a failure part-way leaves a partial tree. With
    ``staged`` the new tree is assembled in a sibling temp directory and
    swapped in only once every file has been written.
    """

    def __init__(self, output_path: str | Path, *, staged: bool = False) -> None:
        self.output_path = Path(output_path)
        self.staged = staged

    def write(self, documents: list[Document]) -> list[Path]:
        if self.staged:
            return self._write_staged(documents)

        _clear_directory(self.output_path)
        paths = self._write_tree(self.output_path, documents)
        logger.info("wrote %d documents to %s", len(paths), self.output_path)
        return paths

    # -- internals ---------------------------------------------------------

    def _target(self, root: Path, document: Document) -> Path:
        dest = root / document.path
        if not dest.resolve().is_relative_to(root.resolve()):
            raise PathError(document.path, root)
        return dest

    def _write_tree(self, root: Path, documents: list[Document]) -> list[Path]:
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise BuildIOError("Could not create output dir", root, exc) from exc

        paths: list[Path] = []
        for document in documents:
            dest = self._target(root, document)
            try:
                dest.parent.mkdir(parents=True, exist_ok=True)
                dest.write_bytes(document.body.encode("utf-8"))
            except OSError as exc:
                raise BuildIOError("Could not write output file", dest, exc) from exc
            logger.debug("wrote %s (%d bytes)", dest, len(document.body))
            paths.append(dest)
        return paths

    def _write_staged(self, documents: list[Document]) -> list[Path]:
        parent = self.output_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
            staging = parent / f".{self.output_path.name}-{uuid.uuid4().hex[:8]}"
            # same umask-derived mode as the root of an unstaged build
            staging.mkdir()
        except OSError as exc:
            raise BuildIOError("Could not create staging dir", parent, exc) from exc

        try:
            staged_paths = self._write_tree(staging, documents)
        except Exception:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        self._swap(staging)
        paths = [self.output_path / p.relative_to(staging) for p in staged_paths]
        logger.info("wrote %d documents to %s (staged)", len(paths), self.output_path)
        return paths

    def _swap(self, staging: Path) -> None:
        """Move ``staging`` into place, retiring the previous output tree."""
        retired = None
        try:
            if self.output_path.exists():
                retired = staging.with_name(staging.name + ".old")
                self.output_path.rename(retired)
            staging.rename(self.output_path)
        except OSError as exc:
            if retired is not None and not self.output_path.exists():
                retired.rename(self.output_path)
            shutil.rmtree(staging, ignore_errors=True)
            raise BuildIOError("Could not swap staged output into place", self.output_path, exc) from exc

        if retired is not None:
            _clear_directory(retired)


def write_documents(
    documents: list[Document], output_path: str | Path, *, staged: bool = False
) -> list[Path]:
    """Convenience wrapper around DocumentWriter(output_path).write()."""
    return DocumentWriter(output_path, staged=staged).write(documents)
