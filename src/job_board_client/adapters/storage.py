"""Key-value storage adapters for persisted client state."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

_logger = logging.getLogger(__name__)


class KeyValueStorage(Protocol):
    """Interface for string key-value storage."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value for a key, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value under a key, replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Remove a key if present."""


@dataclass
class InMemoryStorage(KeyValueStorage):
    """Storage kept in process memory."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        """Return the value for a key."""
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        """Store a value."""
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        """Remove a key."""
        self.items.pop(key, None)


@dataclass
class JsonFileStorage(KeyValueStorage):
    """Storage persisted as a single JSON object on disk."""

    path: Path

    def get_item(self, key: str) -> str | None:
        """Return the value for a key from the file."""
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        """Write a value to the file."""
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        """Remove a key from the file."""
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)

    def _load(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            _logger.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        return payload if isinstance(payload, dict) else {}

    def _save(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items), encoding="utf-8")
