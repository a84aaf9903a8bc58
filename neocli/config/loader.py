# ============================================================================
# CONFIGURATION LOADER - Environment-aware config file resolution
# ============================================================================

"""
Locate and parse the node config file.

RESPONSIBILITY:
- Pick the file name: ``config.json`` or ``config.<NEO_NETWORK>.json``
- Search the candidate directories in order, first hit wins:
    1. current working directory
    2. directory of the running entry-point script
    3. directory of the neocli package itself
- Parse the file into a ConfigSection tree
- Return an EMPTY tree when no candidate has the file (defaults apply)

A file that exists but cannot be parsed is fatal: ConfigFileError is
raised, there is no fallback to defaults.

INPUTS:
- .env file (loaded with python-dotenv, never overrides the real env)
- NEO_NETWORK environment variable
- config file (JSON, or YAML when the loader uses a YAML extension)

OUTPUTS:
- ConfigSection (root of the parsed document)
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Iterable, List, Optional

import yaml
from dotenv import load_dotenv

from neocli.config.constants import CONFIG_BASE_NAME, CONFIG_EXTENSION, YAML_EXTENSIONS
from neocli.config.environment import EnvironmentSettings
from neocli.config.section import ConfigSection
from neocli.core.exceptions import ConfigFileError

logger = logging.getLogger(__name__)

# Directory holding the neocli package
LIBRARY_DIR = Path(__file__).resolve().parents[1]


def entry_point_dir() -> Optional[Path]:
    """Directory of the script the interpreter was started with, if any."""
    main = sys.modules.get("__main__")
    main_file = getattr(main, "__file__", None)
    if not main_file and sys.argv and sys.argv[0] not in ("", "-c", "-m"):
        main_file = sys.argv[0]
    if not main_file:
        return None
    return Path(main_file).resolve().parent


def default_search_paths() -> List[Path]:
    """Candidate directories in priority order, duplicates removed."""
    candidates = [Path(os.getcwd()), entry_point_dir(), LIBRARY_DIR]
    ordered: List[Path] = []
    for candidate in candidates:
        if candidate is not None and candidate not in ordered:
            ordered.append(candidate)
    return ordered


class ConfigLoader:
    """Resolve the config file name and load the first matching candidate."""

    def __init__(
        self,
        base_name: str = CONFIG_BASE_NAME,
        search_paths: Optional[Iterable[Path]] = None,
        extension: str = CONFIG_EXTENSION,
    ):
        """
        Args:
            base_name: File name without extension (default: "config")
            search_paths: Directories to search, in order (default: cwd,
                entry-point dir, package dir)
            extension: ".json" (default), ".yaml" or ".yml"
        """
        load_dotenv(override=False)

        self.base_name = base_name
        self.extension = extension if extension.startswith(".") else f".{extension}"
        self.environment = EnvironmentSettings().network
        self.search_paths = (
            [Path(p) for p in search_paths] if search_paths is not None else default_search_paths()
        )

    @property
    def file_name(self) -> str:
        if self.environment:
            return f"{self.base_name}.{self.environment}{self.extension}"
        return f"{self.base_name}{self.extension}"

    def find(self) -> Optional[Path]:
        """Return the first existing candidate file, or None."""
        for directory in self.search_paths:
            candidate = directory / self.file_name
            logger.debug(f"🔎 Looking for {self.file_name} in {directory}")
            if candidate.is_file():
                return candidate
        return None

    def load(self) -> ConfigSection:
        """
        Load configuration.

        Returns:
            Parsed tree, or an empty tree when no candidate file exists

        Raises:
            ConfigFileError: File found but unreadable or not a valid document
        """
        path = self.find()
        if path is None:
            logger.info(f"⊘ {self.file_name} not found, using built-in defaults")
            return ConfigSection.empty()

        logger.info(f"📂 Loading configuration from {path}")
        return ConfigSection.from_mapping(self._parse(path))

    def _parse(self, path: Path) -> dict:
        try:
            text = path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"❌ Cannot read {path}: {e}")
            raise ConfigFileError(f"Cannot read config file {path}: {e}", context={"path": str(path)}) from e

        try:
            data: Any
            if path.suffix.lower() in YAML_EXTENSIONS:
                data = yaml.safe_load(text) or {}
            else:
                data = json.loads(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            logger.error(f"❌ Parse error in {path}: {e}")
            raise ConfigFileError(f"Malformed config file {path}: {e}", context={"path": str(path)}) from e

        if not isinstance(data, dict):
            raise ConfigFileError(
                f"Config file {path} must contain an object at the top level, got {type(data).__name__}",
                context={"path": str(path)},
            )
        return data


def load_config(base_name: str = CONFIG_BASE_NAME) -> ConfigSection:
    """Resolve ``base_name`` against the default candidate directories."""
    return ConfigLoader(base_name).load()
