"""Line-based reader/writer helpers for `key: value` scheme snippets.

The snippet is the body of a `preset_color_schemes` entry in a Rime
`*.custom.yaml`. It is NOT parsed as YAML. A regex-and-split reader is
enough. The reader is lenient: anything that does not look like
`key: value` is dropped.

Known limitation: `#` starts a comment anywhere on the line, so a value
written as `#rrggbbaa` is lost. Snippets carry colors as `0x` wire values.
"""

import logging
import re

_log = logging.getLogger('rime_scheme.core.scheme_text')

_COMMENT = re.compile(r'#.*')
_QUOTES = re.compile(r'^[\'"]|[\'"]$')


def to_yaml_string(text: str) -> str:
    """Quote as a YAML single-quoted scalar (embedded ' doubled)."""
    return "'" + text.replace("'", "''") + "'"


def trim_quotes(text: str = '') -> str:
    """Strip whitespace, then one leading and one trailing quote char."""
    return _QUOTES.sub('', text.strip())


def format_line(key: str, value: str) -> str:
    return f'{key}: {value}'


def parse_scheme_lines(text: str) -> dict[str, str]:
    """Parse a scheme snippet into a flat {key: raw value} dict.

    A line counts only when, after comment stripping, splitting on ':'
    leaves exactly two non-empty trimmed parts. Quoted values keep any
    doubled '' as-is. Later duplicates win.
    """
    result: dict[str, str] = {}
    for lineno, raw in enumerate(text.split('\n'), start=1):
        line = _COMMENT.sub('', raw)
        parts = [p.strip() for p in line.split(':')]
        parts = [p for p in parts if p]
        if len(parts) != 2:
            if parts:
                _log.debug('line %d dropped: %r', lineno, raw)
            continue
        key, value = parts
        result[key] = trim_quotes(value)
    return result
