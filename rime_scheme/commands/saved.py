"""List saved schemes: id, name, author."""

from rime_scheme.core.types import Command

command = Command(name='saved', help='List saved schemes.')


@command.run
def run(store, args) -> None:
    items = store.saved
    if not items:
        print('No saved schemes.')
        return
    for item in items:
        name = item.fields.get('name') or '(unnamed)'
        author = item.fields.get('author', '')
        print(f'{item.id}  {name}  {author}'.rstrip())
