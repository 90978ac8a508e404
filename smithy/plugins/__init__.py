"""Plugin contract, pipeline runner and plugin discovery."""

from smithy.plugins.base import Plugin
from smithy.plugins.builtin import ExtensionRewriter, FrontMatterEmitter, IndexGenerator
from smithy.plugins.loader import PluginLoader, PluginNotFoundError
from smithy.plugins.runner import PipelineRunner

__all__ = [
    "ExtensionRewriter",
    "FrontMatterEmitter",
    "IndexGenerator",
    "PipelineRunner",
    "Plugin",
    "PluginLoader",
    "PluginNotFoundError",
]
