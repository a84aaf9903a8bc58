"""
================================================================================
CONFIG PACKAGE - Node configuration
================================================================================

EXPORTS
-------
    get_settings()   - Published Settings (loads config.json on first use)
    initialize()     - Publish Settings from an already-loaded tree
    load_config()    - Resolve and parse config.json / config.<network>.json
    Settings         - Pydantic models for type hints

ARCHITECTURE
------------
neocli/config/
├── __init__.py     ← This file (exports everything)
├── constants.py    ← Built-in defaults and file/section names
├── environment.py  ← NEO_NETWORK / NEO_LOG_LEVEL (pydantic-settings)
├── section.py      ← ConfigSection tree
├── loader.py       ← Candidate-directory search + parsing
└── settings.py     ← Pydantic groups, binders, singleton

USAGE
-----
# Let the node find its own config:
from neocli.config import get_settings

settings = get_settings()

# Or hand over a tree loaded elsewhere (test harnesses):
from neocli.config import initialize, load_config

initialize(load_config("config"))
================================================================================
"""

from neocli.config.environment import EnvironmentSettings
from neocli.config.section import ConfigSection
from neocli.config.loader import ConfigLoader, default_search_paths, load_config
from neocli.config.settings import (
    LoggerSettings,
    P2PSettings,
    Settings,
    StorageSettings,
    UnlockWalletSettings,
    get_settings,
    initialize,
    is_initialized,
    reset_settings,
)

__all__ = [
    'EnvironmentSettings',
    'ConfigSection',
    'ConfigLoader',
    'default_search_paths',
    'load_config',
    'LoggerSettings',
    'P2PSettings',
    'Settings',
    'StorageSettings',
    'UnlockWalletSettings',
    'get_settings',
    'initialize',
    'is_initialized',
    'reset_settings',
]
