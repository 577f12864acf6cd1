"""Edit a scheme one field at a time and print the result as a snippet.

Starts from an empty scheme, or from --from FILE. Each KEY=VALUE sets one
field; KEY= with nothing after it unsets the field again. Colors take
#rgb, #rrggbb or #rrggbbaa. name, author, color_format (argb/rgba/abgr)
and color_space (display_p3/srgb) are set the same way.

Unknown keys and bad values abort the edit. Nothing is printed or saved.

Example:
    rime-scheme set name='Ink Paper' text_color='#1e1e1e' back_color='#faf8f5'
    rime-scheme set --from scheme.yaml hilited_candidate_back_color='#c47e3a' --save
    rime-scheme set --from scheme.yaml label_color=
"""

import argparse
import sys

from rime_scheme.commands._io import load_into
from rime_scheme.core.types import Command

command = Command(name='set', help='Set or unset scheme fields and print the snippet.')


def _assignment(text: str) -> tuple[str, str]:
    key, sep, value = text.partition('=')
    if not sep or not key.strip():
        raise argparse.ArgumentTypeError(f'expected KEY=VALUE, got {text!r}')
    return key.strip(), value.strip()


@command.arguments
def arguments(parser) -> None:
    parser.add_argument('assignments', nargs='+', type=_assignment, metavar='KEY=VALUE', help='Fields to set')
    parser.add_argument('--from', dest='source', metavar='FILE', help="Start from a snippet, '-' for stdin")
    parser.add_argument('--save', action='store_true', help='Also add the result to the saved schemes')


@command.run
def run(store, args) -> None:
    if args.source:
        load_into(store, args.source)
    else:
        store.restore_scheme()
    for key, value in args.assignments:
        store.set_field(key, value)
    print(store.export_scheme())
    if args.save:
        print(f'saved {store.save_scheme()}', file=sys.stderr)
