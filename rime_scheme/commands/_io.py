"""Helpers shared by commands that read a scheme snippet."""

import sys

from rime_scheme.core.scheme import SchemeStore


def read_text(path: str) -> str:
    """Read a snippet from `path`, or from stdin when path is '-'."""
    if path == '-':
        return sys.stdin.read()
    with open(path, encoding='utf-8') as f:
        return f.read()


def load_into(store: SchemeStore, path: str) -> None:
    store.import_scheme(read_text(path))


def add_file_argument(parser) -> None:
    parser.add_argument('file', help="Scheme snippet (key: value lines), '-' for stdin")
