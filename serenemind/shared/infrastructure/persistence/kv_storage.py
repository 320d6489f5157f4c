"""Local key-value storage for Serenemind.

A flat ``{key: value}`` mapping kept in one JSON file, the desktop/mobile
counterpart of a platform preferences store. Values must be JSON compatible.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class KeyValueStorage(Protocol):
    """Minimal preferences-style storage interface."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> bool: ...

    def contains(self, key: str) -> bool: ...

    def remove(self, key: str) -> bool: ...


class InMemoryStorage:
    """Dict-backed storage used by tests and UI previews."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._data: Dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        self._data[key] = value
        return True

    def contains(self, key: str) -> bool:
        return key in self._data

    def remove(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def snapshot(self) -> Dict[str, Any]:
        return dict(self._data)


class JsonFileStorage:
    """Key-value storage persisted as a single JSON object on disk.

    The file is read lazily on first access. A missing file is an empty
    store; a corrupt one is moved aside and replaced by an empty store.
    Every write rewrites the whole file through a temporary sibling so a
    crash mid-write never leaves a truncated file behind.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._data: Optional[Dict[str, Any]] = None

    # --- Reading ---

    def _ensure_loaded(self) -> Dict[str, Any]:
        if self._data is None:
            self._data = self._read_file()
        return self._data

    def _read_file(self) -> Dict[str, Any]:
        if not self.path.exists():
            logger.info(f"Storage file not found, starting empty: {self.path}")
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            logger.warning(f"Storage file is unreadable ({type(e).__name__}), resetting: {self.path}")
            self._quarantine()
            return {}
        except OSError as e:
            logger.error(f"Could not read storage file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Storage file top level is {type(data).__name__}, expected object; resetting")
            self._quarantine()
            return {}

        logger.debug(f"Loaded {len(data)} key(s) from {self.path}")
        return data

    def _quarantine(self) -> None:
        """Move an unreadable storage file aside so the next write starts clean."""
        stamp = datetime.now().strftime('%Y%m%d_%H%M%S_%f')
        backup_path = self.path.with_name(f"{self.path.stem}.corrupted-{stamp}.json")
        suffix = 1
        while backup_path.exists():
            backup_path = self.path.with_name(f"{self.path.stem}.corrupted-{stamp}-{suffix}.json")
            suffix += 1
        try:
            self.path.replace(backup_path)
            logger.warning(f"Corrupted storage file moved to {backup_path}")
        except OSError as e:
            logger.error(f"Could not move corrupted storage file aside: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        return self._ensure_loaded().get(key, default)

    def contains(self, key: str) -> bool:
        return key in self._ensure_loaded()

    # --- Writing ---

    def set(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key`` and flush to disk.

        Returns False when the file could not be written; the in-memory
        value is kept in that case. A value that is not JSON compatible is
        rejected and leaves the store untouched.
        """
        try:
            json.dumps(value)
        except (TypeError, ValueError) as e:
            logger.error(f"Refusing to store '{key}': value is not JSON compatible ({e})")
            return False
        data = self._ensure_loaded()
        data[key] = value
        return self._flush()

    def remove(self, key: str) -> bool:
        data = self._ensure_loaded()
        if key not in data:
            return False
        del data[key]
        return self._flush()

    def _flush(self) -> bool:
        temp_file = self.path.with_suffix('.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(self._data, f, ensure_ascii=False, indent=2)
            temp_file.replace(self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write storage file {self.path}: {e}")
            return False
        return True
