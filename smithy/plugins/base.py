"""Plugin base class: the extension point of the build pipeline."""

from __future__ import annotations

from collections.abc import Iterable

from smithy.document import Document


class Plugin:
    """A transformation applied to the document collection.

    Subclasses override exactly one of:

    - ``process_file`` for a per-document transform (rename, rewrite). The
      default ``process`` calls it for each document in order and stops at
      the first exception.
    - ``process`` for transforms that need the whole collection at once
      (indexing, filtering, reordering, fan-out). The result may be any
      iterable of Documents and need not match the input in length.
    """

    #: Display name used in logs and errors. Defaults to the class name.
    name: str | None = None

    def __str__(self) -> str:
        return self.name or type(self).__name__

    def process(self, documents: list[Document]) -> Iterable[Document]:
        return [self.process_file(document) for document in documents]

    def process_file(self, document: Document) -> Document:
        return document
