# ============================================================================
# SETTINGS - Typed, immutable node configuration
# ============================================================================

"""
Type-safe, immutable settings groups bound from a ConfigSection tree.

Loads configuration from:
1. config file found by config/loader.py (or an empty tree)
2. built-in defaults (config/constants.py, network.peer.Peer)
3. Pydantic validation (type conversion, port range)

RESPONSIBILITY:
- Define one frozen Pydantic model per group (Logger, Storage, P2P,
  UnlockWallet) with a ``from_section`` binder
- Compose them into the Settings aggregate
- Publish exactly one Settings instance per process
- NO file I/O here (that's loader.py)

Present-but-malformed values are fatal (SettingsValueError). They are
never replaced by defaults.

USAGE:
from neocli.config import get_settings

settings = get_settings()
port = settings.p2p.port
"""

import logging
import re
import threading
from typing import Annotated, Any, Dict, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from neocli.config.constants import (
    CONFIG_BASE_NAME,
    DEFAULT_CONSOLE_OUTPUT,
    DEFAULT_LOG_PATH,
    DEFAULT_LOGGER_ACTIVE,
    DEFAULT_MAX_CONNECTIONS_PER_ADDRESS,
    DEFAULT_P2P_PORT,
    DEFAULT_PLUGIN_URL,
    DEFAULT_STORAGE_ENGINE,
    DEFAULT_WS_PORT,
    KEY_PLUGIN_URL,
    MAX_PORT,
    ROOT_SECTION,
    SECTION_LOGGER,
    SECTION_P2P,
    SECTION_STORAGE,
    SECTION_UNLOCK_WALLET,
)
from neocli.config.loader import load_config
from neocli.config.section import ConfigSection
from neocli.core.exceptions import NeoNodeException, SettingsValueError
from neocli.network.peer import Peer
from neocli.network.protocol import get_protocol_settings

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

_INT_PATTERN = re.compile(r"^\s*[+-]?\d+\s*$")


def _parse_bool(value: Any) -> bool:
    """Only ``true``/``false`` (any case); ``yes``, ``1``, ``on`` are typos."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError("expected 'true' or 'false'")


def _parse_int(value: Any) -> int:
    """Plain decimal digits only; ``10333.0`` and ``20_333`` are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INT_PATTERN.match(value):
        return int(value)
    raise ValueError("expected a whole number")


ConfigBool = Annotated[bool, BeforeValidator(_parse_bool)]
ConfigInt = Annotated[int, BeforeValidator(_parse_int)]


def _bind(
    model: Type[M],
    section: ConfigSection,
    keys: Dict[str, str],
    resolved: Optional[Dict[str, Any]] = None,
) -> M:
    """
    Validate the leaves named in ``keys`` (config key -> field) into ``model``.

    Absent leaves fall back to the model's defaults. Any leaf that is
    present but fails conversion raises SettingsValueError.
    """
    raw: Dict[str, Any] = dict(resolved or {})
    for key, field in keys.items():
        value = section.get_value(key)
        if value is not None:
            raw[field] = value

    try:
        return model.model_validate(raw)
    except ValidationError as e:
        field_to_key = {field: key for key, field in keys.items()}
        problems = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            key = field_to_key.get(field, field)
            problems.append(f"{section.path or section.key}:{key}={error.get('input')!r} ({error['msg']})")
        raise SettingsValueError(
            "Invalid configuration value: " + "; ".join(problems),
            context={"section": section.path, "errors": problems},
        ) from e

# ============================================================================
# LOGGER SETTINGS
# ============================================================================

class LoggerSettings(BaseModel):
    """Node log output. ``path`` is already resolved against the protocol magic."""
    model_config = ConfigDict(frozen=True)

    path: str
    console_output: ConfigBool = DEFAULT_CONSOLE_OUTPUT
    active: ConfigBool = DEFAULT_LOGGER_ACTIVE

    @classmethod
    def from_section(cls, section: ConfigSection) -> "LoggerSettings":
        template = section.get_value("Path", DEFAULT_LOG_PATH)
        magic_hex = get_protocol_settings().magic_hex
        try:
            path = template.format(magic_hex)
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise SettingsValueError(
                f"Logger:Path template {template!r} cannot be formatted: {e}",
                context={"section": section.path, "template": template},
            ) from e

        return _bind(
            cls,
            section,
            {"ConsoleOutput": "console_output", "Active": "active"},
            resolved={"path": path},
        )

# ============================================================================
# STORAGE SETTINGS
# ============================================================================

class StorageSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine: str = DEFAULT_STORAGE_ENGINE

    @classmethod
    def from_section(cls, section: ConfigSection) -> "StorageSettings":
        return _bind(cls, section, {"Engine": "engine"})

# ============================================================================
# P2P SETTINGS
# ============================================================================

class P2PSettings(BaseModel):
    """
    Peer-to-peer listener ports and connection limits.

    Connection-limit defaults come from the peer manager and are read
    when the model is built, not at import time.
    """
    model_config = ConfigDict(frozen=True)

    port: ConfigInt = Field(default=DEFAULT_P2P_PORT, ge=0, le=MAX_PORT)
    ws_port: ConfigInt = Field(default=DEFAULT_WS_PORT, ge=0, le=MAX_PORT)
    min_desired_connections: ConfigInt = Field(
        default_factory=lambda: Peer.DEFAULT_MIN_DESIRED_CONNECTIONS
    )
    max_connections: ConfigInt = Field(default_factory=lambda: Peer.DEFAULT_MAX_CONNECTIONS)
    max_connections_per_address: ConfigInt = DEFAULT_MAX_CONNECTIONS_PER_ADDRESS

    @classmethod
    def from_section(cls, section: ConfigSection) -> "P2PSettings":
        return _bind(
            cls,
            section,
            {
                "Port": "port",
                "WsPort": "ws_port",
                "MinDesiredConnections": "min_desired_connections",
                "MaxConnections": "max_connections",
                "MaxConnectionsPerAddress": "max_connections_per_address",
            },
        )

# ============================================================================
# UNLOCK WALLET SETTINGS
# ============================================================================

class UnlockWalletSettings(BaseModel):
    """
    Wallet to open (and optionally start consensus with) at startup.

    Always present: without an UnlockWallet section every field keeps its
    empty default and ``is_active`` is False. The password is kept exactly
    as written in the config file.
    """
    model_config = ConfigDict(frozen=True)

    path: str = ""
    password: str = Field(default="", repr=False)
    start_consensus: ConfigBool = False
    is_active: ConfigBool = False

    @classmethod
    def from_section(cls, section: ConfigSection) -> "UnlockWalletSettings":
        if not section.exists():
            return cls()
        return _bind(
            cls,
            section,
            {
                "Path": "path",
                "Password": "password",
                "StartConsensus": "start_consensus",
                "IsActive": "is_active",
            },
        )

# ============================================================================
# ROOT SETTINGS - Main Configuration Container
# ============================================================================

class Settings(BaseModel):
    """
    Node settings - the single immutable configuration aggregate.

    ARCHITECTURE:
    - config/loader.py → Locate and parse config file
    - config/settings.py → Bind and validate groups (THIS FILE)
    - config/__init__.py → Expose via get_settings()

    USAGE:
    from neocli.config import get_settings

    settings = get_settings()
    engine = settings.storage.engine
    url = settings.plugin_download_url("ApplicationLogs", "2.10.3")
    """
    model_config = ConfigDict(frozen=True)

    logger: LoggerSettings
    storage: StorageSettings
    p2p: P2PSettings
    unlock_wallet: UnlockWalletSettings
    plugin_url: str = DEFAULT_PLUGIN_URL

    @classmethod
    def from_section(cls, section: ConfigSection) -> "Settings":
        """Bind every group from the ``ApplicationConfiguration`` section."""
        return cls(
            logger=LoggerSettings.from_section(section.get_section(SECTION_LOGGER)),
            storage=StorageSettings.from_section(section.get_section(SECTION_STORAGE)),
            p2p=P2PSettings.from_section(section.get_section(SECTION_P2P)),
            unlock_wallet=UnlockWalletSettings.from_section(section.get_section(SECTION_UNLOCK_WALLET)),
            plugin_url=section.get_value(KEY_PLUGIN_URL, DEFAULT_PLUGIN_URL),
        )

    @classmethod
    def from_configuration(cls, configuration: ConfigSection) -> "Settings":
        """Bind from the root of a parsed config document."""
        return cls.from_section(configuration.get_section(ROOT_SECTION))

    def plugin_download_url(self, name: str, version: str) -> str:
        return self.plugin_url.format(name, version)

# ============================================================================
# SINGLETON PATTERN - Global Settings Instance
# ============================================================================

_settings_instance: Optional[Settings] = None

# Guards the unset -> set transition only
_install_lock = threading.Lock()
# Serializes implicit (lazy) construction so concurrent readers build once
_load_lock = threading.Lock()


def _install(settings: Settings) -> bool:
    global _settings_instance

    with _install_lock:
        if _settings_instance is not None:
            return False
        _settings_instance = settings
    logger.info(
        f"✅ Settings initialized (storage={settings.storage.engine}, "
        f"p2p={settings.p2p.port}/{settings.p2p.ws_port})"
    )
    return True


def _update_default(configuration: ConfigSection) -> bool:
    try:
        settings = Settings.from_configuration(configuration)
    except NeoNodeException as e:
        logger.error(f"❌ Failed to build settings: {e}")
        raise
    return _install(settings)


def initialize(configuration: Union[ConfigSection, Mapping[str, Any]]) -> bool:
    """
    Build settings from an already-loaded configuration and publish them.

    Args:
        configuration: Parsed config root (ConfigSection or plain mapping)

    Returns:
        True if this call published its settings, False if settings were
        already published (the published instance is left untouched)

    Raises:
        SettingsValueError: A present value has the wrong type
    """
    if not isinstance(configuration, ConfigSection):
        configuration = ConfigSection.from_mapping(configuration)

    installed = _update_default(configuration)
    if not installed:
        logger.debug("Settings already initialized, keeping published instance")
    return installed


def get_settings() -> Settings:
    """
    Get the published Settings, loading ``config.json`` on first use.

    Returns:
        Settings: The process-wide instance (same object for every caller)

    Raises:
        ConfigFileError: Config file found but malformed
        SettingsValueError: A present value has the wrong type
    """
    settings = _settings_instance
    if settings is not None:
        return settings

    # held across the file read so concurrent first readers build only once
    with _load_lock:
        if _settings_instance is None:
            logger.debug("Settings not initialized, resolving configuration file")
            _update_default(load_config(CONFIG_BASE_NAME))
    return _settings_instance


def is_initialized() -> bool:
    return _settings_instance is not None


def reset_settings() -> None:
    """Reset settings instance (for testing purposes)."""
    global _settings_instance

    with _install_lock:
        _settings_instance = None
    logger.debug("Settings reset for testing")
