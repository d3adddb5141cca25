"""Persisted user preferences (preferred catalog language, ...)."""

import json
import os
from pathlib import Path
from typing import Protocol

from .._logging import logger

PREFERRED_BOOK_LANG_STR = "preferred_book_language"


class PreferenceStore(Protocol):
    def get_string(self, key: str, default: str | None = None) -> str | None: ...

    def put_string(self, key: str, value: str) -> None: ...


class InMemoryPreferenceStore:
    """Preference store that lives only as long as the process."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def put_string(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonPreferenceStore:
    """
    Preference store backed by a JSON file.
    Defaults to $XDG_CONFIG_HOME/pageflow/preferences.json.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        if path is None:
            xdg_config_home = os.environ.get("XDG_CONFIG_HOME", str(Path.home() / ".config"))
            path = Path(xdg_config_home) / "pageflow" / "preferences.json"
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error(
                "Error loading preferences", extra={"path": str(self.path), "error": str(e)}
            )
            return {}
        return data if isinstance(data, dict) else {}

    def get_string(self, key: str, default: str | None = None) -> str | None:
        value = self._load().get(key, default)
        return value if value is None or isinstance(value, str) else str(value)

    def put_string(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        logger.debug("Preference saved", extra={"key": key})
