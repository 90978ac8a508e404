"""Locating and reading smithy.yaml.

An explicit ``--config`` path always wins and is never skipped. Without
one, ``./smithy.yaml`` then ``~/.smithy/config.yaml`` are tried, and the
first non-empty file is used. Strings may reference ``${VAR}`` or
``${VAR:-fallback}``.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import SmithyConfig

_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")


def default_config_paths() -> list[Path]:
    return [Path("smithy.yaml"), Path.home() / ".smithy" / "config.yaml"]


def load_config(cli_path: str | None = None) -> SmithyConfig:
    if cli_path:
        path = Path(cli_path)
        if not path.is_file():
            raise ValueError(f"Config file not found: {cli_path}")
        return _build(path, _read(path) or {})

    for path in default_config_paths():
        if not path.is_file():
            continue
        raw = _read(path)
        if raw:
            return _build(path, raw)

    return SmithyConfig()


def _read(path: Path) -> dict[str, Any] | None:
    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e
    if raw is not None and not isinstance(raw, dict):
        raise ValueError(f"Invalid config in {path}: expected a mapping, got {type(raw).__name__}")
    return raw


def _build(path: Path, raw: dict[str, Any]) -> SmithyConfig:
    try:
        return SmithyConfig.model_validate(expand_env(raw))
    except ValidationError as e:
        raise ValueError(f"Invalid config in {path}: {e}") from e


def expand_env(value: Any) -> Any:
    """Substitute environment references in every string of a YAML tree.

    Unset variables without a fallback become the empty string.
    """
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), value)
    if isinstance(value, dict):
        return {k: expand_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env(v) for v in value]
    return value


# Default YAML template for `smithy config init`
DEFAULT_CONFIG_TEMPLATE = """\
# smithy.yaml

# Directories
input_dir: "input"
output_dir: "output"           # deleted and rebuilt on every build

# Loader
loader:
  sort: false                  # order documents by path instead of filesystem order

# Output
output:
  staged: false                # write to a temp dir and swap it in when complete

# Plugins, run in order. Entry point names or "module.path:ClassName".
plugins: []
#  - extension-rewriter
#  - name: index
#    options:
#      filename: "_index.md"

# Logging
log_level: "info"              # debug | info | warn | error
log_format: "text"             # text | json
"""
