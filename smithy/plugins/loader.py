"""Plugin discovery and loading via entry points or dotted references."""

from __future__ import annotations

import importlib
import importlib.metadata
from typing import TYPE_CHECKING, Any

from smithy.errors import SmithyError
from smithy.plugins.base import Plugin

if TYPE_CHECKING:
    from smithy.config.models import PluginSpec


class PluginNotFoundError(SmithyError):
    """Raised when a requested plugin cannot be found."""

    def __init__(self, name: str, cause: BaseException | None = None):
        self.name = name
        super().__init__(f"No plugin found with name '{name}'", cause)


class PluginLoader:
    """Resolves plugin references into ready-to-run Plugin instances.

    A reference is either the name of an entry point registered under
    ``smithy.plugins`` (``index``) or a ``module.path:ClassName`` string.
    """

    GROUP = "smithy.plugins"

    def discover(self) -> dict[str, str]:
        """Scan entry points. Returns {name: "module:attr"}."""
        eps = importlib.metadata.entry_points(group=self.GROUP)
        return {ep.name: ep.value for ep in eps}

    def _load_from_entry_point(self, name: str) -> object | None:
        eps = importlib.metadata.entry_points(group=self.GROUP)
        for ep in eps:
            if ep.name == name:
                return ep.load()
        return None

    def _load_from_reference(self, reference: str) -> object:
        module_path, _, attr = reference.partition(":")
        try:
            module = importlib.import_module(module_path)
            return getattr(module, attr)
        except (ImportError, AttributeError) as exc:
            raise PluginNotFoundError(reference, exc) from exc

    def resolve(self, name: str) -> object:
        """Return the class (or instance) a reference points to."""
        if ":" in name:
            return self._load_from_reference(name)
        target = self._load_from_entry_point(name)
        if target is None:
            raise PluginNotFoundError(name)
        return target

    def load(self, name: str, options: dict[str, Any] | None = None) -> Plugin:
        target = self.resolve(name)
        options = options or {}

        if isinstance(target, Plugin):
            if options:
                raise SmithyError(f"Plugin '{name}' is an instance and takes no options")
            return target
        if not (isinstance(target, type) and issubclass(target, Plugin)):
            raise SmithyError(f"'{name}' does not refer to a Plugin subclass")

        try:
            return target(**options)
        except (TypeError, ValueError) as exc:
            raise SmithyError(f"Invalid options for plugin '{name}'", exc) from exc

    def load_all(self, specs: list[PluginSpec]) -> list[Plugin]:
        """Load every configured plugin, preserving order."""
        return [self.load(spec.name, spec.options) for spec in specs]
