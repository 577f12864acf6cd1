"""Remove a saved scheme by id. Unknown ids are ignored."""

from rime_scheme.core.types import Command

command = Command(name='remove', help='Remove a saved scheme.')


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('id', help='Saved scheme id')


@command.run
def run(store, args) -> None:
    store.remove_saved_scheme(args.id)
