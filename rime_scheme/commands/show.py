"""Print every effective color of a scheme snippet, marking derived values.

Reads a `key: value` snippet, applies the fallback chains for the active
platform and lists each color the front end would use. Values with no
override of their own are marked with '*'.

Example:
    rime-scheme show my_scheme.yaml
    rime-scheme --platform squirrel show my_scheme.yaml --json
"""

from rime_scheme.commands._io import add_file_argument, load_into
from rime_scheme.core.report import format_json, format_text
from rime_scheme.core.types import Command

command = Command(name='show', help='Print effective colors of a scheme snippet.')


@command.arguments
def arguments(parser) -> None:
    add_file_argument(parser)
    parser.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')


@command.run
def run(store, args) -> None:
    load_into(store, args.file)
    print(format_json(store) if args.json else format_text(store))
