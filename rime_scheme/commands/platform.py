"""Print the stored platform, or store a new one.

The platform picks which optional fields a scheme has and how it is
exported: weasel writes color_format, squirrel writes color_space.

Example:
    rime-scheme platform
    rime-scheme platform squirrel
"""

from rime_scheme.core.preferences import KEYS
from rime_scheme.core.types import PLATFORMS, Command

command = Command(name='platform', help='Print or set the stored platform (weasel/squirrel).')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('name', nargs='?', choices=PLATFORMS, help='Platform to store')


@command.run
def run(store, args) -> None:
    if args.name:
        store.preferences.set(KEYS['PLATFORM'], args.name)
    print(store.preferences.get(KEYS['PLATFORM']))
