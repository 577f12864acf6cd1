"""Re-export a scheme snippet with every effective color filled in.

Derived colors (label, comment, highlighted label, ...) are written out
explicitly. Weasel output uses the snippet's color_format unless
--color-format is given. Squirrel output is always abgr and ends with
color_space, taken from the snippet unless --color-space is given.

Example:
    rime-scheme export my_scheme.yaml
    rime-scheme export my_scheme.yaml --color-format rgba > full.yaml
    rime-scheme --platform squirrel export my_scheme.yaml --color-space display_p3
"""

from rime_scheme.commands._io import add_file_argument, load_into
from rime_scheme.core.color import COLOR_FORMATS, COLOR_SPACES
from rime_scheme.core.types import Command

command = Command(name='export', help='Re-export a snippet with all effective colors.')


@command.arguments
def arguments(parser) -> None:
    add_file_argument(parser)
    parser.add_argument('-f', '--color-format', choices=COLOR_FORMATS, help='Output wire format (weasel only)')
    parser.add_argument('--color-space', choices=COLOR_SPACES, help='Output color_space (squirrel only)')


@command.run
def run(store, args) -> None:
    load_into(store, args.file)
    if args.color_format:
        store.scheme.weasel.color_format = args.color_format
    if args.color_space:
        store.scheme.squirrel.color_space = args.color_space
    print(store.export_scheme())
