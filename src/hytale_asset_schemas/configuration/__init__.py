"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .runtime_settings import (
    ArtifactSettings,
    Configuration,
    GeneratorSettings,
    PublicationSettings,
)

__all__ = [
    "ArtifactSettings",
    "Configuration",
    "GeneratorSettings",
    "PublicationSettings",
    "ConfigurationError",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
