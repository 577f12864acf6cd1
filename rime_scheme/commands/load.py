"""Load a saved scheme by id and print it as a snippet.

Example:
    rime-scheme load 1760900000000000000 > scheme.yaml
"""

from rime_scheme.core.types import Command, UnknownNameError

command = Command(name='load', help='Print a saved scheme as a snippet.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('id', help='Saved scheme id (see `rime-scheme saved`)')


@command.run
def run(store, args) -> None:
    if not store.import_saved_scheme(args.id):
        raise UnknownNameError(f'No saved scheme with id {args.id}')
    print(store.export_scheme())
