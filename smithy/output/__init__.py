"""Output subsystem: writes the built document tree to disk."""

from smithy.output.writer import DocumentWriter, write_documents

__all__ = ["DocumentWriter", "write_documents"]
