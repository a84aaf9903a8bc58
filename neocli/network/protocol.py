"""
Protocol-level network identity.

Only the magic number is modelled here: it namespaces per-network files
such as the node log directory. Loading full protocol settings is the
node's job; callers that know the real network install it with
``set_protocol_settings`` before settings are first bound.
"""

import logging
import threading
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

# MainNet magic ("ANt" little-endian)
DEFAULT_MAGIC = 0x00746E41


class ProtocolSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    magic: int = Field(default=DEFAULT_MAGIC, ge=0, le=0xFFFFFFFF)

    @property
    def magic_hex(self) -> str:
        """Magic as 8 upper-case hex digits, e.g. ``00746E41``."""
        return f"{self.magic:08X}"


_protocol_settings: Optional[ProtocolSettings] = None
_lock = threading.Lock()


def get_protocol_settings() -> ProtocolSettings:
    """Return the active protocol settings (MainNet defaults if none set)."""
    global _protocol_settings

    if _protocol_settings is None:
        with _lock:
            if _protocol_settings is None:
                _protocol_settings = ProtocolSettings()
    return _protocol_settings


def set_protocol_settings(settings: ProtocolSettings) -> None:
    global _protocol_settings

    with _lock:
        _protocol_settings = settings
    logger.debug(f"Protocol magic set to {settings.magic_hex}")
