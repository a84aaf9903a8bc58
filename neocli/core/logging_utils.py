# ============================================================================
# Logging setup - console handler for node start-up diagnostics
# ============================================================================

"""
Attach a single console handler to the ``neocli`` logger.

Sink construction for the node log file (LoggerSettings.path) belongs to
the node itself; this helper only makes configuration resolution visible
while the node boots.
"""

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_NAME = "neocli-console"


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Configure the ``neocli`` logger (safe to call more than once).

    Args:
        level: Explicit level; falls back to NEO_LOG_LEVEL, then INFO.

    Returns:
        The configured ``neocli`` logger.
    """
    if level is None:
        from neocli.config.environment import EnvironmentSettings

        level = EnvironmentSettings().log_level
    if isinstance(level, str):
        level = level.upper()

    root = logging.getLogger("neocli")
    root.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
