"""Composite a foreground color over a background (source-over).

Both colors are #rrggbbaa. This is the blend used to derive label colors
from candidate text and back colors.

Example:
    rime-scheme blend '#ff000080' '#0000ffff'
"""

from rime_scheme.core.color import blend_hexa
from rime_scheme.core.types import Command

command = Command(name='blend', help='Composite one #rrggbbaa color over another.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('foreground', help='#rrggbbaa')
    parser.add_argument('background', help='#rrggbbaa')


@command.run
def run(store, args) -> None:
    print(blend_hexa(args.foreground, args.background))
