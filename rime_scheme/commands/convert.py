"""Convert a #rgb / #rrggbb / #rrggbbaa color to a 0x wire value.

Example:
    rime-scheme convert '#112233' --format argb     # 0xff112233
    rime-scheme convert '#11223344' --format abgr   # 0x44332211
"""

from rime_scheme.core.color import COLOR_FORMATS, export_wire_color
from rime_scheme.core.types import Command

command = Command(name='convert', help='Convert a hexa color to a 0x wire value.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='#rgb, #rrggbb or #rrggbbaa')
    parser.add_argument('-f', '--format', default='abgr', choices=COLOR_FORMATS, help='Wire format (default: abgr)')


@command.run
def run(store, args) -> None:
    print(export_wire_color(args.color, args.format))
