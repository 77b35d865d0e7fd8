"""
Dictionary-like object with attribute access and dotted-path lookups.
"""

from collections.abc import Iterator
from typing import Any


class DotDictPathNotFoundError(KeyError):
    """Raised when a dotted path does not resolve to a value."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Path not found: {path}")


class DotDictReservedKeyError(ValueError):
    """Raised when a key would shadow a DotDict method."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key '{key}' is reserved and cannot be used (would shadow method)")


class DotDict:
    """
    Dictionary-like object with attribute-style access and nested structure support.

    Example:
        d = DotDict(logging={"level": "info"})
        d.logging.level          # "info"
        d.get("logging.level")   # "info"
        d.has("ui.prompt")       # False
    """

    # Keys that would shadow methods
    _RESERVED_KEYS = frozenset({"set", "get", "has", "to_dict", "clear"})

    def __init__(self, /, **kwargs: Any) -> None:
        self.set(**kwargs)

    def set(self, /, **kwargs: Any) -> "DotDict":
        """Set key-value pairs, converting nested dicts to DotDict."""
        for key, val in kwargs.items():
            key = str(key)
            if key in self._RESERVED_KEYS:
                raise DotDictReservedKeyError(key)
            if isinstance(val, dict):
                val = DotDict(**val)
            elif isinstance(val, list):
                val = [DotDict(**v) if isinstance(v, dict) else v for v in val]
            setattr(self, key, val)
        return self

    def clear(self) -> None:
        """Remove all public keys, keeping private attributes."""
        for key in list(self._keys()):
            delattr(self, key)

    def _keys(self) -> Iterator[str]:
        return (k for k in vars(self) if not k.startswith("_"))

    def _lookup(self, path: str) -> Any:
        current: Any = self
        for part in path.split("."):
            if isinstance(current, DotDict) and part in current:
                current = getattr(current, part)
            else:
                raise DotDictPathNotFoundError(path)
        return current

    def get(self, path: str, default: Any = None) -> Any:
        """Return the value at a dotted path, or ``default`` if it is missing."""
        try:
            return self._lookup(path)
        except DotDictPathNotFoundError:
            return default

    def has(self, path: str) -> bool:
        """Check whether a dotted path resolves to a value."""
        try:
            self._lookup(path)
        except DotDictPathNotFoundError:
            return False
        return True

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain nested dict."""
        result: dict[str, Any] = {}
        for key in self._keys():
            val = getattr(self, key)
            if isinstance(val, DotDict):
                val = val.to_dict()
            elif isinstance(val, list):
                val = [v.to_dict() if isinstance(v, DotDict) else v for v in val]
            result[key] = val
        return result

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and not key.startswith("_") and key in vars(self)

    def __getitem__(self, key: str) -> Any:
        if key not in self:
            raise KeyError(key)
        return getattr(self, key)

    def __iter__(self) -> Iterator[str]:
        return self._keys()

    def __len__(self) -> int:
        return sum(1 for _ in self._keys())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DotDict):
            return self.to_dict() == other.to_dict()
        if isinstance(other, dict):
            return self.to_dict() == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"DotDict({self.to_dict()!r})"
