"""Shared types for rime-scheme: ColorScheme, its platform variants, SavedScheme, Command."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Literal

from rime_scheme.core.color import COLOR_SPACES, InvalidColorFormat, is_color_format, normalize_hexa

_log = logging.getLogger('rime_scheme.core.types')

Platform = Literal['weasel', 'squirrel']
PLATFORMS: tuple[str, ...] = ('weasel', 'squirrel')

# Color fields every platform has, in export order.
BASE_COLOR_FIELDS = (
    'text_color',
    'label_color',
    'comment_text_color',
    'back_color',
    'border_color',
    'candidate_text_color',
    'candidate_back_color',
    'hilited_text_color',
    'hilited_back_color',
    'hilited_candidate_text_color',
    'hilited_comment_text_color',
    'hilited_candidate_back_color',
)

WEASEL_COLOR_FIELDS = (
    'shadow_color',
    'candidate_border_color',
    'candidate_shadow_color',
    'hilited_label_color',
    'hilited_mark_color',
    'hilited_shadow_color',
    'hilited_candidate_border_color',
    'hilited_candidate_shadow_color',
    'prevpage_color',
    'nextpage_color',
)

SQUIRREL_COLOR_FIELDS = (
    'preedit_back_color',
    'hilited_candidate_label_color',
)

COLOR_FIELDS = BASE_COLOR_FIELDS + WEASEL_COLOR_FIELDS + SQUIRREL_COLOR_FIELDS
TEXT_FIELDS = ('name', 'author', 'color_format', 'color_space')


class UnknownNameError(KeyError):
    """A name given by the user (command, scheme field, saved id) matches nothing."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ''


@dataclass
class WeaselColors:
    """Fields only weasel reads. Colors are `#rrggbbaa` or None."""

    color_format: str = 'abgr'
    shadow_color: str | None = None
    candidate_border_color: str | None = None
    candidate_shadow_color: str | None = None
    hilited_label_color: str | None = None
    hilited_mark_color: str | None = None
    hilited_shadow_color: str | None = None
    hilited_candidate_border_color: str | None = None
    hilited_candidate_shadow_color: str | None = None
    prevpage_color: str | None = None
    nextpage_color: str | None = None


@dataclass
class SquirrelColors:
    """Fields only squirrel reads. color_space is carried, never interpreted."""

    color_space: str = 'srgb'
    preedit_back_color: str | None = None
    hilited_candidate_label_color: str | None = None


@dataclass
class ColorScheme:
    """Sparse user overrides. None means "not set, use the fallback"."""

    name: str = ''
    author: str = ''
    text_color: str | None = None
    label_color: str | None = None
    comment_text_color: str | None = None
    back_color: str | None = None
    border_color: str | None = None
    candidate_text_color: str | None = None
    candidate_back_color: str | None = None
    hilited_text_color: str | None = None
    hilited_back_color: str | None = None
    hilited_candidate_text_color: str | None = None
    hilited_comment_text_color: str | None = None
    hilited_candidate_back_color: str | None = None
    weasel: WeaselColors = field(default_factory=WeaselColors)
    squirrel: SquirrelColors = field(default_factory=SquirrelColors)

    def _owner(self, key: str) -> object:
        if key in WEASEL_COLOR_FIELDS or key == 'color_format':
            return self.weasel
        if key in SQUIRREL_COLOR_FIELDS or key == 'color_space':
            return self.squirrel
        if key in BASE_COLOR_FIELDS or key in ('name', 'author'):
            return self
        raise UnknownNameError(f'Unknown scheme field: {key}')

    def get(self, key: str) -> str | None:
        """Read a field by its flat key, e.g. 'prevpage_color'."""
        return getattr(self._owner(key), key)

    def set(self, key: str, value: str | None) -> None:
        """Write a field by its flat key."""
        setattr(self._owner(key), key, value)

    def populated(self) -> dict[str, str]:
        """Flat dict of every field holding a non-empty value."""
        result = {}
        for key in TEXT_FIELDS + COLOR_FIELDS:
            value = self.get(key)
            if value:
                result[key] = value
        return result


@dataclass
class SavedScheme:
    """A snapshot of a scheme's populated raw fields, tagged with an id."""

    id: str
    fields: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, str]:
        return {'id': self.id, **self.fields}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SavedScheme:
        """Read a record from the preferences file, which users may edit by hand.

        Colors are normalized to `#rrggbbaa`. Values that cannot be used
        (bad colors, unknown color_format or color_space) are dropped.
        """
        scheme_id = str(data.get('id', ''))
        fields = {}
        for key, value in data.items():
            if not isinstance(value, str) or not value:
                continue
            if key in COLOR_FIELDS:
                try:
                    fields[key] = normalize_hexa(value)
                except InvalidColorFormat:
                    _log.warning('saved scheme %s: dropping %s=%r', scheme_id, key, value)
            elif key == 'color_format' and not is_color_format(value):
                _log.warning('saved scheme %s: dropping color_format=%r', scheme_id, value)
            elif key == 'color_space' and value not in COLOR_SPACES:
                _log.warning('saved scheme %s: dropping color_space=%r', scheme_id, value)
            elif key in TEXT_FIELDS:
                fields[key] = value
        return cls(id=scheme_id, fields=fields)


class Command:
    """A self-registering CLI subcommand.

    Usage in a command module:

        command = Command(name='blend', help='Composite one color over another')

        @command.arguments
        def arguments(parser):
            parser.add_argument('foreground')

        @command.run
        def run(store, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function adding subcommand arguments."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, store: Any, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(store, args)
