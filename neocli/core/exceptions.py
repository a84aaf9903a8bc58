"""
================================================================================
FILE: neocli/core/exceptions.py
================================================================================

PURPOSE:
    Exception hierarchy for node start-up configuration. Every error raised
    while resolving, parsing or binding settings derives from
    NeoNodeException so callers can fail fast with one except clause.

EXCEPTION CATEGORIES:
    - FATAL (process should stop at startup):
        * ConfigurationError: Invalid configuration (generic)
        * ConfigFileError: Config file found but unreadable or unparsable
        * SettingsValueError: Present config leaf has the wrong type

    A missing config file is NOT an error (defaults apply), and a second
    call to initialize() is NOT an error (it reports False).

KEY FACTS:
    - NO imports from neocli modules (prevents circular dependencies)
    - Each exception has error_code for categorization
    - context dict carries file path / section / key for logging
"""

# ================================================================================
# IMPORTS
# ================================================================================

from typing import Optional, Dict, Any

# ================================================================================
# SECTION 1: BASE EXCEPTIONS
# ================================================================================

class NeoNodeException(Exception):
    """
    Root exception for all node errors.

    Attributes:
        message (str): Human-readable error message
        error_code (str): Machine-readable error code for categorization
        context (dict): Additional context (optional)
    """

    def __init__(
        self,
        message: str,
        error_code: str = "UNKNOWN_ERROR",
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dict for structured logging"""
        return {
            "error": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context
        }


class FatalException(NeoNodeException):
    """
    Exception that cannot be recovered.

    Raised for permanent failures; the node should refuse to start rather
    than run with partially-applied settings.
    """
    pass

# ================================================================================
# SECTION 2: CONFIGURATION EXCEPTIONS
# ================================================================================

class ConfigurationError(FatalException):
    """Invalid configuration (fatal)"""

    def __init__(
        self,
        message: str,
        context: Optional[Dict] = None,
        error_code: str = "CONFIG_ERROR"
    ):
        super().__init__(message, error_code=error_code, context=context)


class ConfigFileError(ConfigurationError):
    """Config file exists but could not be read or parsed"""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, context=context, error_code="CONFIG_FILE_ERROR")


class SettingsValueError(ConfigurationError):
    """A config value is present but cannot be converted to its declared type"""

    def __init__(self, message: str, context: Optional[Dict] = None):
        super().__init__(message, context=context, error_code="SETTINGS_VALUE_ERROR")
