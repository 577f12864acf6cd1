"""Convert a 0x wire value back to #rrggbbaa.

Six digits mean alpha was omitted and is taken as ff.

Example:
    rime-scheme import-color 0xff0000ff --format argb   # #0000ffff
    rime-scheme import-color 0xff0000 --format rgba     # #ff0000ff
"""

from rime_scheme.core.color import COLOR_FORMATS, import_wire_color
from rime_scheme.core.types import Command

command = Command(name='import-color', help='Convert a 0x wire value to #rrggbbaa.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('color', help='0x followed by 6 or 8 hex digits')
    parser.add_argument('-f', '--format', default='abgr', choices=COLOR_FORMATS, help='Wire format (default: abgr)')


@command.run
def run(store, args) -> None:
    print(import_wire_color(args.color, args.format))
