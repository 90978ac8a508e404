"""Input side of a build: directory traversal and document parsing."""

from smithy.loader.walker import DocumentLoader, load_documents

__all__ = ["DocumentLoader", "load_documents"]
