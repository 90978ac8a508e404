"""Front matter detection and parsing.

A document opens with a ``---`` line to declare a YAML block, which runs
until the next ``---`` line. Anything else is treated as plain body text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from smithy.document.models import Document
from smithy.errors import MetadataParseError

FRONT_MATTER_DELIMITER = "---\n"


def split_front_matter(text: str) -> tuple[str | None, str]:
    """Split raw text into (front_matter_text, body).

    front_matter_text is None when the text does not start with the
    delimiter or the block is never closed; body is then ``text`` as-is.
    When a block is found the body is stripped and ends with one newline.
    """
    segments = text.split(FRONT_MATTER_DELIMITER)
    if len(segments) < 3 or segments[0] != "":
        return None, text

    body = FRONT_MATTER_DELIMITER.join(segments[2:]).strip() + "\n"
    return segments[1], body


def parse_front_matter(front_matter: str, path: str | Path) -> Any:
    try:
        return yaml.safe_load(front_matter)
    except yaml.YAMLError as exc:
        raise MetadataParseError(path, exc) from exc


def parse_document(path: str | Path, text: str) -> Document:
    """Build a Document from a root-relative path and the file's text.

    Raises MetadataParseError if a front matter block is present but is
    not valid YAML.
    """
    front_matter, body = split_front_matter(text)
    if front_matter is None:
        return Document(path=Path(path), metadata=None, body=body)
    metadata = parse_front_matter(front_matter, path)
    return Document(path=Path(path), metadata=metadata, body=body)
