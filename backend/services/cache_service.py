import json
import logging
import time
from pathlib import Path
from typing import Any, Protocol

from config import settings

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def save(self, key: str, value: Any) -> None: ...

    def load(self, key: str) -> Any | None: ...

    def clear(self) -> None: ...


class TTLCache:
    def __init__(self, ttl: int | None = None):
        self._store: dict[str, tuple[Any, float]] = {}
        self._ttl = ttl or settings.cache_ttl_seconds

    def load(self, key: str) -> Any | None:
        if key in self._store:
            value, ts = self._store[key]
            if time.time() - ts < self._ttl:
                return value
            del self._store[key]
        return None

    def save(self, key: str, value: Any) -> None:
        self._store[key] = (value, time.time())

    def clear(self) -> None:
        self._store.clear()


class JsonFileStore:
    """Keeps every key in one JSON document on disk.

    Values must be JSON-serializable. An unreadable file is treated as empty.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)

    def _read(self) -> dict[str, Any]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable cache file %s: %s", self._path, e)
            return {}
        return data if isinstance(data, dict) else {}

    def load(self, key: str) -> Any | None:
        return self._read().get(key)

    def save(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(json.dumps(data), encoding="utf-8")
        tmp.replace(self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)


def create_store() -> KeyValueStore:
    if settings.cache_path:
        return JsonFileStore(settings.cache_path)
    return TTLCache()
