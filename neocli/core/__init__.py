"""Core building blocks shared across neocli (exceptions, logging setup)."""

from neocli.core.exceptions import (
    NeoNodeException,
    FatalException,
    ConfigurationError,
    ConfigFileError,
    SettingsValueError,
)
from neocli.core.logging_utils import setup_logging

__all__ = [
    "NeoNodeException",
    "FatalException",
    "ConfigurationError",
    "ConfigFileError",
    "SettingsValueError",
    "setup_logging",
]
