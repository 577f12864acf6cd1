"""Store a scheme snippet in the saved list and print its id.

Only the fields the snippet sets are kept, not derived values.
"""

from rime_scheme.commands._io import add_file_argument, load_into
from rime_scheme.core.types import Command

command = Command(name='save', help='Add a snippet to the saved schemes. Prints its id.')


@command.arguments
def arguments(parser) -> None:
    add_file_argument(parser)


@command.run
def run(store, args) -> None:
    load_into(store, args.file)
    print(store.save_scheme())
