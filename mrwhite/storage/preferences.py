"""
Preference stores for the few facts that outlive a single match.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

KEY_LAST_STARTER = "last_starter"
KEY_PLAYERS = "players"
KEY_WORD_URL = "word_url"


class PreferenceStore(ABC):
    """
    Abstract key-value store for cross-match preferences.

    The match engine only touches the last-starter pair; player names and
    the word-list locator are for whoever sets up the match.
    """

    @abstractmethod
    def get_last_starter(self) -> Optional[str]:
        """Name of the player who spoke first last match, if any."""
        pass

    @abstractmethod
    def set_last_starter(self, name: str) -> None:
        pass

    @abstractmethod
    def get_player_names(self) -> List[str]:
        pass

    @abstractmethod
    def set_player_names(self, names: List[str]) -> None:
        pass

    @abstractmethod
    def get_word_locator(self) -> str:
        """Custom word-list URL, or "" for the built-in list."""
        pass

    @abstractmethod
    def set_word_locator(self, locator: str) -> None:
        pass


class _DictPreferenceStore(PreferenceStore):
    """Shared accessors over a plain dict of values."""

    def __init__(self):
        self._values: Dict[str, Any] = {}

    def _get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def _set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get_last_starter(self) -> Optional[str]:
        return self._get(KEY_LAST_STARTER) or None

    def set_last_starter(self, name: str) -> None:
        self._set(KEY_LAST_STARTER, name)

    def get_player_names(self) -> List[str]:
        names = self._get(KEY_PLAYERS) or []
        return [str(name) for name in names]

    def set_player_names(self, names: List[str]) -> None:
        self._set(KEY_PLAYERS, list(names))

    def get_word_locator(self) -> str:
        return self._get(KEY_WORD_URL) or ""

    def set_word_locator(self, locator: str) -> None:
        self._set(KEY_WORD_URL, locator)


class InMemoryPreferenceStore(_DictPreferenceStore):
    """Preferences that live only as long as the process."""

    def __init__(self, last_starter: Optional[str] = None,
                 player_names: Optional[List[str]] = None,
                 word_locator: str = ""):
        super().__init__()
        if last_starter:
            self.set_last_starter(last_starter)
        if player_names:
            self.set_player_names(player_names)
        if word_locator:
            self.set_word_locator(word_locator)


class JsonPreferenceStore(_DictPreferenceStore):
    """Preferences saved as a small JSON object on disk."""

    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self._lock = Lock()
        self._values = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable preferences file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring preferences file %s: expected a JSON object", self.path)
            return {}
        return data

    def _set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                json.dump(self._values, f, indent=2)
