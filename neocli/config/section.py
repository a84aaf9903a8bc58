# ============================================================================
# CONFIG SECTION - Hierarchical key/value view over a parsed config file
# ============================================================================

"""
Read-only tree of named sections and string leaves.

The loader parses a document into plain Python data; ``ConfigSection``
turns that into the shape binders expect:

- keys are matched case-insensitively (``p2p`` finds ``P2P``)
- scalar leaves are stored as strings (``true``/``false`` for bools,
  decimal text for numbers); ``null`` leaves are treated as absent
- lists become sections keyed ``"0"``, ``"1"``, ...
- ``get_section`` never fails: a missing key yields an empty section
  whose ``exists()`` is False

USAGE:
    root = ConfigSection.from_mapping({"ApplicationConfiguration": {...}})
    p2p = root.get_section("ApplicationConfiguration:P2P")
    port = p2p.get_value("Port", "10333")
"""

from typing import Any, Dict, Iterator, List, Mapping, Optional

KEY_DELIMITER = ":"


def _to_leaf(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ConfigSection:
    """One node of the configuration tree."""

    def __init__(
        self,
        key: str = "",
        path: str = "",
        value: Optional[str] = None,
        children: Optional[Dict[str, "ConfigSection"]] = None,
    ):
        self.key = key
        self.path = path
        self.value = value
        # lower-cased key -> child
        self._children: Dict[str, ConfigSection] = children or {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "ConfigSection":
        return cls()

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]], key: str = "", path: str = "") -> "ConfigSection":
        """Build a tree from parsed JSON/YAML data."""
        section = cls(key=key, path=path)
        for child_key, child_value in (data or {}).items():
            section._add(str(child_key), child_value)
        return section

    def _add(self, key: str, raw: Any) -> None:
        path = f"{self.path}{KEY_DELIMITER}{key}" if self.path else key
        if isinstance(raw, Mapping):
            child = ConfigSection.from_mapping(raw, key=key, path=path)
        elif isinstance(raw, (list, tuple)):
            child = ConfigSection.from_mapping(
                {str(i): item for i, item in enumerate(raw)}, key=key, path=path
            )
        else:
            child = ConfigSection(key=key, path=path, value=_to_leaf(raw))
        # later duplicates (differing only by case) win, like a key/value store
        self._children[key.lower()] = child

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def exists(self) -> bool:
        return self.value is not None or bool(self._children)

    def get_section(self, key: str) -> "ConfigSection":
        """Return the child at ``key`` (``:``-separated), or an empty section."""
        node = self
        for part in key.split(KEY_DELIMITER):
            child = node._children.get(part.lower())
            if child is None:
                path = f"{self.path}{KEY_DELIMITER}{key}" if self.path else key
                return ConfigSection(key=key.split(KEY_DELIMITER)[-1], path=path)
            node = child
        return node

    def get_value(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.get_section(key).value
        return default if value is None else value

    def get_children(self) -> List["ConfigSection"]:
        return list(self._children.values())

    def to_dict(self) -> Dict[str, Any]:
        """Nested dict of the subtree, leaves as strings."""
        result: Dict[str, Any] = {}
        for child in self._children.values():
            result[child.key] = child.to_dict() if child._children else child.value
        return result

    def __contains__(self, key: str) -> bool:
        return self.get_section(key).exists()

    def __iter__(self) -> Iterator[str]:
        return (child.key for child in self._children.values())

    def __repr__(self) -> str:
        if self.value is not None:
            return f"ConfigSection(path={self.path!r}, value={self.value!r})"
        return f"ConfigSection(path={self.path!r}, children={len(self._children)})"
