"""Configuration domain exports."""

from .loader import PREFIX_REQUIRED_MESSAGE, ConfigurationError, load_configuration
from .runtime_settings import PrefixSettings

__all__ = [
    "PrefixSettings",
    "ConfigurationError",
    "PREFIX_REQUIRED_MESSAGE",
    "load_configuration",
]
