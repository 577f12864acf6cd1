"""Report builder — text and JSON views of a scheme's effective colors."""

import json
from typing import Any

from rime_scheme.core.scheme import SchemeStore
from rime_scheme.core.types import BASE_COLOR_FIELDS, SQUIRREL_COLOR_FIELDS, WEASEL_COLOR_FIELDS


def _platform_fields(store: SchemeStore) -> tuple[str, ...]:
    extra = WEASEL_COLOR_FIELDS if store.effective.is_weasel else SQUIRREL_COLOR_FIELDS
    return BASE_COLOR_FIELDS + extra


def format_text(store: SchemeStore) -> str:
    """Format effective colors as human-readable text.

    Derived values (no override set) are marked with '*'.
    """
    eff = store.effective
    scheme = store.scheme
    lines = []

    title = scheme.name or '(unnamed)'
    if scheme.author:
        title += f' by {scheme.author}'
    fmt = f'color_format={eff.color_format}' if eff.is_weasel else f'color_space={eff.color_space}'
    lines.append(f'rime-scheme: {title} \u2014 {store.platform} ({fmt})')
    lines.append('')

    for key in _platform_fields(store):
        value = eff.value(key)
        mark = '' if scheme.get(key) else '*'
        lines.append(f'  {key:<32} {value or "-":<10} {mark}'.rstrip())

    if eff.is_weasel:
        lines.append('')
        lines.append(f'show_pages: {"yes" if eff.show_pages else "no"}')
    return '\n'.join(lines)


def format_json(store: SchemeStore) -> str:
    """Format effective colors as JSON."""
    eff = store.effective
    obj: dict[str, Any] = {
        'name': store.scheme.name,
        'author': store.scheme.author,
        'platform': store.platform,
        'color_format': eff.color_format,
        'color_space': eff.color_space,
    }
    obj['colors'] = {
        key: {'value': eff.value(key), 'override': store.scheme.get(key)} for key in _platform_fields(store)
    }
    obj['show_pages'] = eff.show_pages
    return json.dumps(obj, indent=2, ensure_ascii=False)
