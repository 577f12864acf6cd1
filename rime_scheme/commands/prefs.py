"""Print the stored preferences, or store one of them.

Keys:
  platform        weasel | squirrel
  pageBackground  light | dark       canvas behind `rime-scheme preview`
  pageLanguage    zh-Hans | zh-Hant  defaults from LC_ALL/LC_MESSAGES/LANG

Saved schemes live in the same file; use `saved`, `save` and `remove`.

Example:
    rime-scheme prefs
    rime-scheme prefs pageBackground dark
"""

from rime_scheme.core.preferences import KEYS, PAGE_BACKGROUNDS, PAGE_LANGUAGES
from rime_scheme.core.types import PLATFORMS, Command, UnknownNameError

command = Command(name='prefs', help='Print or set stored preferences.')

CHOICES = {
    KEYS['PLATFORM']: PLATFORMS,
    KEYS['PAGE_BACKGROUND']: PAGE_BACKGROUNDS,
    KEYS['PAGE_LANGUAGE']: PAGE_LANGUAGES,
}


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('key', nargs='?', choices=sorted(CHOICES), help='Preference to set')
    parser.add_argument('value', nargs='?', help='New value')


@command.run
def run(store, args) -> None:
    prefs = store.preferences
    if args.key and args.value:
        if args.value not in CHOICES[args.key]:
            raise UnknownNameError(f'Unknown {args.key}: {args.value}. Choices: {", ".join(CHOICES[args.key])}')
        prefs.set(args.key, args.value)
    keys = [args.key] if args.key else list(CHOICES)
    for key in keys:
        print(f'{key}: {prefs.get(key)}')
