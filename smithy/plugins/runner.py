"""PipelineRunner: folds the document collection through each plugin."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from smithy.document import Document
from smithy.errors import PluginError, SmithyError
from smithy.plugins.base import Plugin

logger = logging.getLogger(__name__)


class PipelineRunner:
    def __init__(self, plugins: Iterable[Plugin] = ()) -> None:
        self.plugins = list(plugins)

    def run(self, documents: list[Document]) -> list[Document]:
        """Feed ``documents`` through every plugin in registration order.

        Plugin i+1 receives exactly what plugin i returned. The first
        failure aborts the chain: SmithyError subclasses propagate as they
        are, anything else is wrapped in PluginError.
        """
        for plugin in self.plugins:
            name = str(plugin)
            count_in = len(documents)
            try:
                documents = list(plugin.process(documents))
            except SmithyError:
                raise
            except Exception as exc:
                raise PluginError(name, exc) from exc
            logger.debug("plugin %s: %d -> %d documents", name, count_in, len(documents))
        return documents
