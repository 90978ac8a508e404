"""Exception hierarchy for Smithy builds."""

from __future__ import annotations

from pathlib import Path


class SmithyError(Exception):
    """Base error for every failure surfaced by a build.

    Carries a human-readable description and, optionally, the underlying
    exception that caused it (also exposed as ``__cause__``).
    """

    def __init__(self, description: str, cause: BaseException | None = None) -> None:
        self.description = description
        self.cause = cause
        super().__init__(description)
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is None:
            return self.description
        return f"{self.description}: {self.cause}"


class BuildIOError(SmithyError):
    """Reading, writing, creating or removing a file or directory failed."""

    def __init__(
        self, description: str, path: str | Path | None = None, cause: BaseException | None = None
    ) -> None:
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            description = f"{description} ({self.path})"
        super().__init__(description, cause)


class PathError(SmithyError):
    """A document path cannot be expressed relative to its root."""

    def __init__(self, path: str | Path, root: str | Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        self.root = Path(root)
        super().__init__(f"Cannot process file outside of {self.root}: {self.path}", cause)


class MetadataParseError(SmithyError):
    """The front matter block of a document is not valid YAML."""

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = Path(path)
        super().__init__(f"Invalid front matter in {self.path}", cause)


class PluginError(SmithyError):
    """A plugin raised while transforming the document collection."""

    def __init__(self, plugin: str, cause: BaseException | None = None) -> None:
        self.plugin = plugin
        super().__init__(f"Plugin {plugin} failed", cause)
