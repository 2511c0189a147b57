"""
Display preferences: colour theme and accessibility settings.

A PreferencesStore is created by whoever owns the page (the app, a prerender
run, a test) and handed to the code that needs it. It listens to OS-level
media queries for the "system" theme and reduced motion, and writes every
change to a key/value storage on a best-effort basis: a failed write is
logged and otherwise ignored.
"""

import json
import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Literal, Optional

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

ThemeSetting = Literal["light", "dark", "system"]
Theme = Literal["light", "dark"]

THEME_KEY = "theme"
A11Y_KEY = "a11y"
THEME_SETTINGS = ("light", "dark", "system")

COLOR_SCHEME_DARK = "(prefers-color-scheme: dark)"
REDUCED_MOTION = "(prefers-reduced-motion: reduce)"


class PersistenceError(Exception):
    """Raised when the preference storage cannot be read or written."""


class A11ySettings(BaseModel):
    text_size: Literal["normal", "large"] = "normal"
    high_contrast: bool = False
    reduce_motion: bool = False


# =============================================================================
# STORAGE
# =============================================================================


class InMemoryStorage:
    """Key/value storage kept in a dict; used when nothing is persisted."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStorage:
    """Key/value storage backed by a single JSON object on disk."""

    def __init__(self, path: os.PathLike | str):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        try:
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e


# =============================================================================
# MEDIA QUERIES
# =============================================================================


class MediaQuery:
    """
    An OS-level boolean setting that can change while the page is open.

    Listeners are called with the new value whenever it changes.
    """

    def __init__(self, query: str, matches: bool = False):
        self.query = query
        self.matches = matches
        self._listeners: List[Callable[[bool], None]] = []

    def add_listener(self, listener: Callable[[bool], None]) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: Callable[[bool], None]) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def set_matches(self, matches: bool) -> None:
        if matches == self.matches:
            return
        self.matches = matches
        for listener in list(self._listeners):
            listener(matches)


# =============================================================================
# PREFERENCES STORE
# =============================================================================


class PreferencesStore:
    """Theme and accessibility preferences for one page session."""

    def __init__(
        self,
        storage=None,
        color_scheme: Optional[MediaQuery] = None,
        reduced_motion: Optional[MediaQuery] = None,
    ):
        self.storage = storage if storage is not None else InMemoryStorage()
        self.color_scheme = color_scheme or MediaQuery(COLOR_SCHEME_DARK)
        self.reduced_motion = reduced_motion or MediaQuery(REDUCED_MOTION)

        self._theme_setting: ThemeSetting = self._load_theme_setting()
        self._a11y = self._load_a11y()
        self._system_theme: Theme = "dark" if self.color_scheme.matches else "light"
        self._system_reduce_motion = self.reduced_motion.matches

        self.color_scheme.add_listener(self._on_color_scheme_change)
        self.reduced_motion.add_listener(self._on_reduced_motion_change)
        self._closed = False

    def close(self) -> None:
        """Stop listening to OS media queries."""
        if self._closed:
            return
        self.color_scheme.remove_listener(self._on_color_scheme_change)
        self.reduced_motion.remove_listener(self._on_reduced_motion_change)
        self._closed = True

    def __enter__(self) -> "PreferencesStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ---- loading and persistence ----

    def _read(self, key: str):
        try:
            raw = self.storage.get(key)
        except PersistenceError as e:
            logger.warning("Preference %r could not be read: %s", key, e)
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Preference %r holds invalid JSON; using default", key)
            return None

    def _write(self, key: str, value) -> None:
        try:
            self.storage.set(key, json.dumps(value))
        except PersistenceError as e:
            logger.warning("Preference %r was not saved: %s", key, e)

    def _load_theme_setting(self) -> ThemeSetting:
        stored = self._read(THEME_KEY)
        return stored if stored in THEME_SETTINGS else "system"

    def _load_a11y(self) -> A11ySettings:
        stored = self._read(A11Y_KEY)
        if stored is None:
            return A11ySettings()
        try:
            return A11ySettings.model_validate(stored)
        except ValidationError:
            logger.warning("Stored accessibility settings are invalid; using defaults")
            return A11ySettings()

    # ---- OS change notifications ----

    def _on_color_scheme_change(self, matches: bool) -> None:
        self._system_theme = "dark" if matches else "light"

    def _on_reduced_motion_change(self, matches: bool) -> None:
        self._system_reduce_motion = matches

    # ---- theme ----

    @property
    def theme_setting(self) -> ThemeSetting:
        return self._theme_setting

    def set_theme_setting(self, setting: ThemeSetting) -> None:
        if setting not in THEME_SETTINGS:
            raise ValueError(f"Unknown theme setting: {setting!r}")
        self._theme_setting = setting
        self._write(THEME_KEY, setting)

    def toggle_theme(self) -> None:
        self.set_theme_setting("light" if self._theme_setting == "dark" else "dark")

    @property
    def theme(self) -> Theme:
        """The theme actually shown, resolving "system" from the OS."""
        if self._theme_setting == "system":
            return self._system_theme
        return self._theme_setting

    # ---- accessibility ----

    @property
    def a11y(self) -> A11ySettings:
        return self._a11y

    def update_a11y(self, **updates) -> A11ySettings:
        """Merge updates into the current settings; raises ValidationError on bad values."""
        self._a11y = A11ySettings.model_validate({**self._a11y.model_dump(), **updates})
        self._write(A11Y_KEY, self._a11y.model_dump())
        return self._a11y

    @property
    def reduce_motion(self) -> bool:
        return self._a11y.reduce_motion or self._system_reduce_motion

    def html_attributes(self) -> Dict[str, str]:
        """Attributes for the root <html> element."""
        return {
            "data-theme": self.theme,
            "data-text-size": self._a11y.text_size,
            "data-high-contrast": "true" if self._a11y.high_contrast else "false",
            "data-reduce-motion": "true" if self.reduce_motion else "false",
        }
