"""Persisted key-value preferences for rime-scheme.

Keys:
  platform        'weasel' or 'squirrel'     (default 'weasel')
  pageBackground  'light' or 'dark'          (default 'light')
  pageLanguage    'zh-Hans' or 'zh-Hant'     (default from the locale)
  saved           list of saved scheme dicts (default [])

The file store keeps one JSON object on disk and rewrites it on every set.
Location: --prefs, else $RIME_SCHEME_PREFS, else
~/.config/rime-scheme/preferences.json.
"""

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

_log = logging.getLogger('rime_scheme.core.preferences')

KEYS = {
    'PLATFORM': 'platform',
    'PAGE_BACKGROUND': 'pageBackground',
    'PAGE_LANGUAGE': 'pageLanguage',
    'SAVED': 'saved',
}

PAGE_BACKGROUNDS = ('light', 'dark')
PAGE_LANGUAGES = ('zh-Hans', 'zh-Hant')

_TRADITIONAL_TAGS =('zh-hant', 'zh-tw', 'zh-hk', 'zh-mo')


class PreferencesError(RuntimeError):
    """The preferences file exists but cannot be used."""


def local_language(environ: Mapping[str, str] | None = None) -> str:
    """Pick the default UI language from the POSIX locale variables."""
    env = os.environ if environ is None else environ
    lang = ''
    for var in ('LC_ALL', 'LC_MESSAGES', 'LANG'):
        if env.get(var):
            lang = env[var]
            break
    tag = lang.split('.')[0].replace('_', '-').lower()
    if any(t in tag for t in _TRADITIONAL_TAGS):
        return 'zh-Hant'
    return 'zh-Hans'


def default_preferences_path() -> Path:
    override = os.environ.get('RIME_SCHEME_PREFS')
    if override:
        return Path(override)
    return Path.home() / '.config' / 'rime-scheme' / 'preferences.json'


def defaults() -> dict[str, Any]:
    return {
        KEYS['PLATFORM']: 'weasel',
        KEYS['PAGE_BACKGROUND']: 'light',
        KEYS['PAGE_LANGUAGE']: local_language(),
        KEYS['SAVED']: [],
    }


class MemoryPreferences:
    """In-memory store. Values are lost when the process exits."""

    def __init__(self, data: dict[str, Any] | None = None):
        self._data: dict[str, Any] = dict(data or {})

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._data:
            return self._data[key]
        if default is None:
            return defaults().get(key)
        return default

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class Preferences(MemoryPreferences):
    """JSON-file store."""

    def __init__(self, path: str | Path | None = None):
        self.path = Path(path) if path else default_preferences_path()
        super().__init__(self._load())

    def _load(self) -> dict[str, Any]:
        if not self.path.is_file():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except json.JSONDecodeError as e:
            raise PreferencesError(f'Corrupt preferences file {self.path}: {e}') from e
        if not isinstance(data, dict):
            raise PreferencesError(f'Preferences file {self.path} must hold a JSON object')
        return data

    def set(self, key: str, value: Any) -> None:
        super().set(key, value)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2, ensure_ascii=False), encoding='utf-8')
        _log.debug('wrote %s to %s', key, self.path)
