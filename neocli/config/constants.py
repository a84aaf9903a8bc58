"""
================================================================================
FILE: neocli/config/constants.py
================================================================================

PURPOSE:
    Built-in fallback values for every setting, plus the names the loader
    uses to find the config file. Nothing here is computed at runtime.

    Peer connection limits are NOT defined here: they are owned by the
    peer manager (neocli.network.peer.Peer) and read at bind time.
"""

# ================================================================================
# FILE RESOLUTION
# ================================================================================

CONFIG_BASE_NAME = "config"
CONFIG_EXTENSION = ".json"
YAML_EXTENSIONS = (".yaml", ".yml")

# Profile override: config.<NEO_NETWORK>.json
NETWORK_ENV_VAR = "NEO_NETWORK"

# Every setting lives below this object in the config file
ROOT_SECTION = "ApplicationConfiguration"

# ================================================================================
# SECTION NAMES
# ================================================================================

SECTION_LOGGER = "Logger"
SECTION_STORAGE = "Storage"
SECTION_P2P = "P2P"
SECTION_UNLOCK_WALLET = "UnlockWallet"
KEY_PLUGIN_URL = "PluginURL"

# ================================================================================
# DEFAULTS
# ================================================================================

# {0} = protocol magic as 8 upper-case hex digits
DEFAULT_LOG_PATH = "Logs_{0}"
DEFAULT_CONSOLE_OUTPUT = False
DEFAULT_LOGGER_ACTIVE = False

DEFAULT_STORAGE_ENGINE = "LevelDBStore"

DEFAULT_P2P_PORT = 10333
DEFAULT_WS_PORT = 10334
DEFAULT_MAX_CONNECTIONS_PER_ADDRESS = 3

# {0} = plugin name, {1} = version
DEFAULT_PLUGIN_URL = "https://github.com/neo-project/neo-modules/releases/download/v{1}/{0}.zip"

MAX_PORT = 65535
