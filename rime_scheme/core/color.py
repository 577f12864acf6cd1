"""Color codec: hexa strings, packed integers and the three wire formats.

Internally a color is a 32-bit packed integer with red in the lowest byte
and alpha in the highest (A<<24 | B<<16 | G<<8 | R). The canonical text
form is `#rrggbbaa`, always lowercase.

At the import/export boundary colors are written as `0x` followed by 8 hex
digits in one of three channel orders. The format name spells the byte
order from the most significant byte down:

    argb  0xAARRGGBB
    rgba  0xRRGGBBAA
    abgr  0xAABBGGRR
"""

import math
import re

COLOR_FORMATS = ('argb', 'rgba', 'abgr')
COLOR_SPACES = ('display_p3', 'srgb')

TRANSPARENT = '#00000000'

_HEX8 = re.compile(r'[0-9a-fA-F]{8}')
_HEX_ANY = re.compile(r'[0-9a-fA-F]*')


class InvalidColorFormat(ValueError):
    """A textual color or a wire format name could not be parsed."""


def is_color_format(value: str | None) -> bool:
    return value in COLOR_FORMATS


def _round(x: float) -> int:
    # Half-up, not Python's banker's rounding.
    return math.floor(x + 0.5)


def _strip_hash(text: str) -> str:
    return text[1:] if text.startswith('#') else text


def _channels_from_hex8(hex8: str, order: str = 'rgba') -> dict[str, int]:
    return {ch: int(hex8[i * 2 : i * 2 + 2], 16) for i, ch in enumerate(order)}


def _hexa(ch: dict[str, int]) -> str:
    return f'#{ch["r"]:02x}{ch["g"]:02x}{ch["b"]:02x}{ch["a"]:02x}'


def parse_hexa(text: str) -> int:
    """Parse a strict `#rrggbbaa` (hash optional) into a packed color."""
    hex8 = _strip_hash(text)
    if not _HEX8.fullmatch(hex8):
        raise InvalidColorFormat(f'Invalid color format: {text!r}')
    ch = _channels_from_hex8(hex8)
    return (ch['a'] << 24) | (ch['b'] << 16) | (ch['g'] << 8) | ch['r']


def packed_to_hexa(value: int) -> str:
    return _hexa(
        {
            'r': value & 0xFF,
            'g': (value >> 8) & 0xFF,
            'b': (value >> 16) & 0xFF,
            'a': (value >> 24) & 0xFF,
        }
    )


def parse_color(text: str) -> dict[str, int]:
    """Relaxed parser: accepts #rgb, #rrggbb and #rrggbbaa (hash optional).

    Returns a dict with keys r, g, b, a. Missing alpha means opaque.
    """
    hex_str = _strip_hash(text.lower())
    if not _HEX_ANY.fullmatch(hex_str):
        raise InvalidColorFormat(f'Invalid color format: {text!r}')
    if len(hex_str) == 3:
        hex_str = ''.join(c + c for c in hex_str)
    if len(hex_str) == 6:
        hex_str += 'ff'
    if len(hex_str) != 8:
        raise InvalidColorFormat(f'Invalid color format: {text!r}')
    return _channels_from_hex8(hex_str)


def normalize_hexa(text: str) -> str:
    """Canonical `#rrggbbaa` for any color `parse_color` accepts."""
    return _hexa(parse_color(text))


def blend(foreground: int, background: int) -> int:
    """Composite `foreground` over `background` (source-over), packed in and out.

    Two fully transparent inputs give 0 (transparent black).
    """
    f_a = ((foreground >> 24) & 0xFF) / 255.0
    b_a = ((background >> 24) & 0xFF) / 255.0
    ret_a = f_a + (1 - f_a) * b_a
    if ret_a == 0:
        return 0

    result = _round(ret_a * 255) << 24
    for shift in (0, 8, 16):
        fg = (foreground >> shift) & 0xFF
        bg = (background >> shift) & 0xFF
        channel = _round((fg * f_a + bg * b_a * (1 - f_a)) / ret_a)
        result |= channel << shift
    return result


def blend_hexa(foreground: str, background: str) -> str:
    return packed_to_hexa(blend(parse_hexa(foreground), parse_hexa(background)))


def pack_channels(ch: dict[str, int], fmt: str) -> int:
    """Pack r/g/b/a channels into an unsigned 32-bit int in `fmt` byte order."""
    if not is_color_format(fmt):
        raise InvalidColorFormat(f'Unsupported color format: {fmt!r}')
    value = 0
    for name in fmt:
        value = (value << 8) | ch[name]
    return value & 0xFFFFFFFF


def export_wire_color(hexa: str, fmt: str) -> str:
    """Render a hexa color (3/6/8 digits) as `0x` + 8 hex digits in `fmt` order."""
    return f'0x{pack_channels(parse_color(hexa), fmt):08x}'


def import_wire_color(text: str, fmt: str) -> str:
    """Parse a `0x` wire color in `fmt` order back into `#rrggbbaa`.

    Six digits mean no alpha was written: `ff` is put where `fmt` keeps
    alpha (in front for argb/abgr, at the end for rgba).
    """
    if not is_color_format(fmt):
        raise InvalidColorFormat(f'Unsupported color format: {fmt!r}')
    if not text.startswith('0x'):
        raise InvalidColorFormat(f'Wire color must start with 0x: {text!r}')
    hex_str = text[2:].lower()
    if len(hex_str) == 6:
        hex_str = hex_str + 'ff' if fmt == 'rgba' else 'ff' + hex_str
    if not _HEX8.fullmatch(hex_str):
        raise InvalidColorFormat(f'Wire color must have 6 or 8 hex digits after 0x: {text!r}')
    return _hexa(_channels_from_hex8(hex_str, fmt))
