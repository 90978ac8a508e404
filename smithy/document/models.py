"""Pydantic model for a single document flowing through the pipeline."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel


class Document(BaseModel):
    """A root-relative path, its parsed front matter, and the body text.

    ``metadata`` is ``None`` when the source had no front matter block.
    Plugins may reassign any field; the writer places the document at
    whatever ``path`` holds when the build reaches the output stage.
    """

    path: Path
    metadata: Any = None
    body: str = ""

    @property
    def has_metadata(self) -> bool:
        return self.metadata is not None

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a top-level front matter key, tolerating non-mapping metadata."""
        if isinstance(self.metadata, dict):
            return self.metadata.get(key, default)
        return default
