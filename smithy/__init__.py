"""Smithy - build an output tree from a document tree through a plugin chain."""

from smithy.builder import BuildReport, Smithy
from smithy.config import SmithyConfig, load_config
from smithy.document import Document, parse_document
from smithy.errors import BuildIOError, MetadataParseError, PathError, PluginError, SmithyError
from smithy.loader import DocumentLoader, load_documents
from smithy.output import DocumentWriter, write_documents
from smithy.plugins import PipelineRunner, Plugin, PluginLoader, PluginNotFoundError

__version__ = "0.1.0"

__all__ = [
    "BuildIOError",
    "BuildReport",
    "Document",
    "DocumentLoader",
    "DocumentWriter",
    "MetadataParseError",
    "PathError",
    "PipelineRunner",
    "Plugin",
    "PluginError",
    "PluginLoader",
    "PluginNotFoundError",
    "Smithy",
    "SmithyConfig",
    "SmithyError",
    "load_config",
    "load_documents",
    "parse_document",
    "write_documents",
]
