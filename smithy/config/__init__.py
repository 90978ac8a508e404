from .loader import DEFAULT_CONFIG_TEMPLATE, load_config
from .models import LoaderConfig, OutputConfig, PluginSpec, SmithyConfig

__all__ = [
    "DEFAULT_CONFIG_TEMPLATE",
    "LoaderConfig",
    "OutputConfig",
    "PluginSpec",
    "SmithyConfig",
    "load_config",
]
