"""Smithy: orchestrates load -> plugin chain -> write for one build."""

from __future__ import annotations

import logging
import time
from pathlib import Path

from pydantic import BaseModel

from smithy.config.models import SmithyConfig
from smithy.loader import DocumentLoader
from smithy.output import DocumentWriter
from smithy.plugins import PipelineRunner, Plugin, PluginLoader

logger = logging.getLogger(__name__)


class BuildReport(BaseModel):
    loaded: int = 0
    written: int = 0
    plugins: list[str] = []
    duration: float = 0.0


class Smithy:
    """Owns the input/output paths and the ordered plugin list.

    Usage::

        report = (
            Smithy.builder("content", "site")
            .add_plugin(ExtensionRewriter(".md", ".html"))
            .build()
        )

    ``build`` raises the first SmithyError hit by any stage; later stages
    do not run. The output directory is only touched after every plugin
    has succeeded.
    """

    def __init__(
        self,
        input_path: str | Path,
        output_path: str | Path,
        plugins: list[Plugin] | None = None,
        *,
        sort: bool = False,
        staged: bool = False,
    ) -> None:
        self.input_path = Path(input_path)
        self.output_path = Path(output_path)
        self.plugins: list[Plugin] = list(plugins or [])
        self.sort = sort
        self.staged = staged

    @classmethod
    def builder(cls, input_path: str | Path, output_path: str | Path) -> Smithy:
        return cls(input_path, output_path)

    @classmethod
    def from_config(cls, config: SmithyConfig, loader: PluginLoader | None = None) -> Smithy:
        loader = loader or PluginLoader()
        return cls(
            config.input_dir,
            config.output_dir,
            loader.load_all(config.plugins),
            sort=config.loader.sort,
            staged=config.output.staged,
        )

    def add_plugin(self, plugin: Plugin) -> Smithy:
        self.plugins.append(plugin)
        return self

    def build(self) -> BuildReport:
        start = time.monotonic()
        report = BuildReport(plugins=[str(p) for p in self.plugins])

        documents = DocumentLoader(self.input_path, sort=self.sort).load()
        report.loaded = len(documents)

        documents = PipelineRunner(self.plugins).run(documents)

        written = DocumentWriter(self.output_path, staged=self.staged).write(documents)
        report.written = len(written)

        report.duration = time.monotonic() - start
        logger.info(
            "built %s -> %s: %d in, %d out in %.2fs",
            self.input_path, self.output_path, report.loaded, report.written, report.duration,
        )
        return report
