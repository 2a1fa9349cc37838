"""
Persisted credential storage for the inventory page.

The backend issues a bearer token elsewhere (login page); this module only
reads it back. ``LocalStorage`` is a small JSON key-value file, and token
providers expose ``get()`` so the API client never touches storage directly.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


class TokenProvider(Protocol):
    def get(self) -> Optional[str]:
        ...


class LocalStorage:
    """String key-value store persisted as a JSON object on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read storage file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items() if v is not None}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = str(value)
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)


class StorageTokenProvider:
    """Reads the token from ``LocalStorage`` on every call."""

    def __init__(self, storage: LocalStorage, key: str = TOKEN_KEY):
        self.storage = storage
        self.key = key

    def get(self) -> Optional[str]:
        return self.storage.get_item(self.key) or None


class StaticTokenProvider:
    def __init__(self, token: Optional[str] = None):
        self.token = token

    def get(self) -> Optional[str]:
        return self.token or None
