from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class PluginSpec(BaseModel):
    """An entry point name or ``module:Class`` reference plus its options."""

    name: str
    options: dict[str, Any] = {}


class LoaderConfig(BaseModel):
    sort: bool = False


class OutputConfig(BaseModel):
    staged: bool = False


class SmithyConfig(BaseModel):
    input_dir: str = "input"
    output_dir: str = "output"
    loader: LoaderConfig = Field(default_factory=LoaderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    plugins: list[PluginSpec] = []
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"

    @field_validator("plugins", mode="before")
    @classmethod
    def _accept_bare_names(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [{"name": item} if isinstance(item, str) else item for item in value]
        return value
