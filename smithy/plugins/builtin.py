"""Reference plugins shipped with Smithy.

Registered as entry points so they can be named from ``smithy.yaml``:
``extension-rewriter``, ``front-matter`` and ``index``.
"""

from __future__ import annotations

import yaml

from smithy.document import FRONT_MATTER_DELIMITER, Document
from smithy.plugins.base import Plugin


class ExtensionRewriter(Plugin):
    """Renames documents ending in ``source`` so they end in ``target``."""

    name = "extension-rewriter"

    def __init__(self, source: str = ".md", target: str = ".html") -> None:
        if not source:
            raise ValueError("source suffix must not be empty")
        self.source = source
        self.target = target

    def process_file(self, document: Document) -> Document:
        filename = document.path.name
        if filename.endswith(self.source):
            stem = filename[: -len(self.source)]
            document.path = document.path.with_name(stem + self.target)
        return document


class FrontMatterEmitter(Plugin):
    """Writes a document's metadata back out as a YAML front matter block.

    Documents without metadata pass through untouched.
    """

    name = "front-matter"

    def __init__(self, sort_keys: bool = False) -> None:
        self.sort_keys = sort_keys

    def process_file(self, document: Document) -> Document:
        if document.metadata is None:
            return document

        dumped = yaml.safe_dump(
            document.metadata,
            default_flow_style=False,
            sort_keys=self.sort_keys,
            allow_unicode=True,
        )
        document.body = f"{FRONT_MATTER_DELIMITER}{dumped}{FRONT_MATTER_DELIMITER}\n{document.body}"
        return document


class IndexGenerator(Plugin):
    """Appends an index document listing every path in the collection."""

    name = "index"

    def __init__(self, filename: str = "_index.md", title: str = "Index") -> None:
        self.filename = filename
        self.title = title

    def process(self, documents: list[Document]) -> list[Document]:
        entries = sorted(documents, key=lambda doc: doc.path.as_posix())

        lines = [f"# {self.title}", ""]
        for doc in entries:
            rel = doc.path.as_posix()
            title = doc.get("title")
            if title:
                lines.append(f"- [{title}]({rel})")
            else:
                lines.append(f"- {rel}")

        index = Document(
            path=self.filename,
            metadata={"title": self.title, "count": len(entries)},
            body="\n".join(lines) + "\n",
        )
        return [*documents, index]
