from neocli.network.peer import Peer
from neocli.network.protocol import (
    DEFAULT_MAGIC,
    ProtocolSettings,
    get_protocol_settings,
    set_protocol_settings,
)

__all__ = [
    "Peer",
    "DEFAULT_MAGIC",
    "ProtocolSettings",
    "get_protocol_settings",
    "set_protocol_settings",
]
