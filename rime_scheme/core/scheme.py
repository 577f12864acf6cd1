"""Scheme model: effective-color derivation and the scheme actions.

A ColorScheme only holds what the user set. Every color the front end
actually draws with is derived on read by EffectiveColors, following a
fixed fallback chain (e.g. label -> blend(candidate text, candidate back)).
Nothing derived is ever stored.

SchemeStore wraps one ColorScheme together with the injected preferences
store, which supplies the platform and keeps the saved-scheme list.
"""

import logging
import time
from typing import Any

from rime_scheme.core.color import (
    COLOR_SPACES,
    TRANSPARENT,
    InvalidColorFormat,
    blend_hexa,
    export_wire_color,
    import_wire_color,
    is_color_format,
    normalize_hexa,
)
from rime_scheme.core.preferences import KEYS
from rime_scheme.core.scheme_text import format_line, parse_scheme_lines, to_yaml_string
from rime_scheme.core.types import (
    BASE_COLOR_FIELDS,
    COLOR_FIELDS,
    PLATFORMS,
    SQUIRREL_COLOR_FIELDS,
    TEXT_FIELDS,
    WEASEL_COLOR_FIELDS,
    ColorScheme,
    Platform,
    SavedScheme,
    UnknownNameError,
)

_log = logging.getLogger('rime_scheme.core.scheme')

DEFAULT_BACK_COLOR = '#ffffffff'
DEFAULT_TEXT_COLOR = '#000000ff'

_PAGE_FIELDS = ('prevpage_color', 'nextpage_color')
_RAW_TEXT_KEYS = ('name', 'author', 'color_space')
# What an emptied text field goes back to.
_TEXT_DEFAULTS = {'name': '', 'author': '', 'color_format': 'abgr', 'color_space': 'srgb'}

_last_id = 0


def _next_id() -> str:
    global _last_id
    n = time.time_ns()
    if n <= _last_id:
        n = _last_id + 1
    _last_id = n
    return str(n)


def _blend(foreground: str, background: str) -> str:
    # An unset background lets the foreground through unchanged.
    return blend_hexa(foreground, background or TRANSPARENT)


class EffectiveColors:
    """Read-only view of the colors a scheme resolves to on one platform.

    Each property is recomputed on access. Properties are named after the
    scheme field they resolve, so `value(key)` works for any color key.
    """

    def __init__(self, scheme: ColorScheme, platform: Platform):
        self.scheme = scheme
        self.platform = platform

    @property
    def is_weasel(self) -> bool:
        return self.platform == 'weasel'

    @property
    def is_squirrel(self) -> bool:
        return self.platform == 'squirrel'

    def value(self, key: str) -> str:
        """Effective value of a color field by key, '' when there is none."""
        if key not in COLOR_FIELDS:
            raise UnknownNameError(f'Unknown color field: {key}')
        return getattr(self, key)

    def _weasel_only(self, key: str) -> str:
        return (self.scheme.get(key) or '') if self.is_weasel else ''

    def _squirrel_only(self, key: str) -> str:
        return (self.scheme.get(key) or '') if self.is_squirrel else ''

    @property
    def color_format(self) -> str:
        return self.scheme.weasel.color_format if self.is_weasel else 'abgr'

    @property
    def color_space(self) -> str:
        return self.scheme.squirrel.color_space if self.is_squirrel else 'srgb'

    @property
    def back_color(self) -> str:
        return self.scheme.back_color or DEFAULT_BACK_COLOR

    @property
    def text_color(self) -> str:
        return self.scheme.text_color or DEFAULT_TEXT_COLOR

    @property
    def border_color(self) -> str:
        return self.scheme.border_color or self.text_color

    @property
    def candidate_text_color(self) -> str:
        return self.scheme.candidate_text_color or self.text_color

    @property
    def candidate_back_color(self) -> str:
        return self.scheme.candidate_back_color or ''

    @property
    def label_color(self) -> str:
        return self.scheme.label_color or _blend(self.candidate_text_color, self.candidate_back_color)

    @property
    def comment_text_color(self) -> str:
        return self.scheme.comment_text_color or self.label_color

    @property
    def preedit_back_color(self) -> str:
        return self._squirrel_only('preedit_back_color')

    @property
    def hilited_text_color(self) -> str:
        return self.scheme.hilited_text_color or self.text_color

    @property
    def hilited_back_color(self) -> str:
        return self.scheme.hilited_back_color or self.preedit_back_color or self.back_color

    @property
    def hilited_candidate_text_color(self) -> str:
        return self.scheme.hilited_candidate_text_color or self.hilited_text_color

    @property
    def hilited_candidate_back_color(self) -> str:
        return self.scheme.hilited_candidate_back_color or self.hilited_back_color

    @property
    def hilited_label_color(self) -> str:
        if not self.is_weasel:
            return ''
        return self.scheme.weasel.hilited_label_color or _blend(
            self.hilited_candidate_text_color, self.hilited_candidate_back_color
        )

    @property
    def hilited_comment_text_color(self) -> str:
        if self.is_weasel:
            return self.scheme.hilited_comment_text_color or self.hilited_label_color
        return self.scheme.hilited_comment_text_color or self.comment_text_color

    @property
    def hilited_candidate_label_color(self) -> str:
        if not self.is_squirrel:
            return ''
        return self.scheme.squirrel.hilited_candidate_label_color or self.hilited_candidate_text_color

    @property
    def shadow_color(self) -> str:
        return self._weasel_only('shadow_color')

    @property
    def candidate_border_color(self) -> str:
        return self._weasel_only('candidate_border_color')

    @property
    def candidate_shadow_color(self) -> str:
        return self._weasel_only('candidate_shadow_color')

    @property
    def hilited_mark_color(self) -> str:
        return self._weasel_only('hilited_mark_color')

    @property
    def hilited_shadow_color(self) -> str:
        return self._weasel_only('hilited_shadow_color')

    @property
    def hilited_candidate_border_color(self) -> str:
        return self._weasel_only('hilited_candidate_border_color')

    @property
    def hilited_candidate_shadow_color(self) -> str:
        return self._weasel_only('hilited_candidate_shadow_color')

    @property
    def prevpage_color(self) -> str:
        return self._weasel_only('prevpage_color')

    @property
    def nextpage_color(self) -> str:
        return self._weasel_only('nextpage_color')

    @property
    def show_pages(self) -> bool:
        return bool(self.is_weasel and self.prevpage_color and self.nextpage_color)


class SchemeStore:
    """The editable scheme plus its actions (export, import, save, ...).

    `platform_override` pins the platform for this store without touching
    the persisted preference.
    """

    def __init__(self, preferences: Any, platform_override: Platform | None = None):
        self.preferences = preferences
        self.platform_override = platform_override
        self.scheme = ColorScheme()

    @property
    def platform(self) -> Platform:
        platform = self.platform_override or self.preferences.get(KEYS['PLATFORM'])
        return platform if platform in PLATFORMS else 'weasel'

    @property
    def effective(self) -> EffectiveColors:
        return EffectiveColors(self.scheme, self.platform)

    @property
    def saved(self) -> list[SavedScheme]:
        return [SavedScheme.from_dict(item) for item in self.preferences.get(KEYS['SAVED']) or []]

    def _write_saved(self, items: list[SavedScheme]) -> None:
        self.preferences.set(KEYS['SAVED'], [s.to_dict() for s in items])

    def export_scheme(self) -> str:
        """Render the effective scheme as `key: value` lines in wire format."""
        eff = self.effective
        fmt = eff.color_format
        res = []

        if self.scheme.name:
            res.append(format_line('name', to_yaml_string(self.scheme.name)))
        if self.scheme.author:
            res.append(format_line('author', to_yaml_string(self.scheme.author)))

        def add_colors(keys) -> None:
            for key in keys:
                value = eff.value(key)
                if value:
                    res.append(format_line(key, export_wire_color(value, fmt)))

        add_colors(BASE_COLOR_FIELDS)
        if eff.is_weasel:
            add_colors(k for k in WEASEL_COLOR_FIELDS if k not in _PAGE_FIELDS)
            if eff.show_pages:
                add_colors(_PAGE_FIELDS)
            res.append(format_line('color_format', fmt))
        else:
            add_colors(SQUIRREL_COLOR_FIELDS)
            res.append(format_line('color_space', eff.color_space))
        return '\n'.join(res)

    def import_scheme(self, text: str) -> None:
        """Replace the scheme with the one described by a snippet.

        Colors are read in the snippet's own `color_format` (abgr when absent
        or unknown), wherever that line sits. Raises InvalidColorFormat if a
        known color key holds a bad value; the current scheme is then left
        as it was.
        """
        parsed = parse_scheme_lines(text)

        input_format = parsed.get('color_format')
        if not is_color_format(input_format):
            input_format = 'abgr'
        _log.debug('importing with color_format=%s', input_format)

        updates = {'color_format': input_format}
        for key, value in parsed.items():
            if not value:
                continue
            if key in _RAW_TEXT_KEYS:
                updates[key] = value
            elif key in COLOR_FIELDS:
                updates[key] = import_wire_color(value, input_format)
            elif key != 'color_format':
                _log.debug('ignoring unknown key %r', key)

        self.restore_scheme()
        for key, value in updates.items():
            self.scheme.set(key, value)

    def set_field(self, key: str, value: str) -> None:
        """Set one raw field from user input. An empty value unsets it.

        Colors may be #rgb, #rrggbb or #rrggbbaa and are stored as
        `#rrggbbaa`. Raises UnknownNameError for an unknown key and
        InvalidColorFormat for a value the field cannot hold.
        """
        if key not in TEXT_FIELDS + COLOR_FIELDS:
            raise UnknownNameError(f'Unknown scheme field: {key}')
        if not value:
            self.scheme.set(key, _TEXT_DEFAULTS.get(key))
            _log.debug('unset %s', key)
            return
        if key in COLOR_FIELDS:
            value = normalize_hexa(value)
        elif key == 'color_format' and not is_color_format(value):
            raise InvalidColorFormat(f'Unsupported color format: {value!r}')
        elif key == 'color_space' and value not in COLOR_SPACES:
            raise InvalidColorFormat(f'Unsupported color space: {value!r}')
        self.scheme.set(key, value)
        _log.debug('set %s=%s', key, value)

    def restore_scheme(self) -> None:
        """Clear every override. Platform and the saved list are untouched."""
        self.scheme = ColorScheme()

    def save_scheme(self) -> str:
        """Snapshot the raw populated fields into the saved list. Returns the new id."""
        item = SavedScheme(id=_next_id(), fields=self.scheme.populated())
        self._write_saved(self.saved + [item])
        _log.debug('saved scheme %s (%d fields)', item.id, len(item.fields))
        return item.id

    def remove_saved_scheme(self, scheme_id: str) -> None:
        items = self.saved
        for i, item in enumerate(items):
            if item.id == scheme_id:
                del items[i]
                self._write_saved(items)
                _log.debug('removed saved scheme %s', scheme_id)
                return

    def import_saved_scheme(self, scheme_id: str) -> bool:
        """Load a saved scheme over a restored one. Returns False if the id is unknown."""
        for item in self.saved:
            if item.id == scheme_id:
                self.restore_scheme()
                for key, value in item.fields.items():
                    self.scheme.set(key, value)
                return True
        return False
