"""Render a PNG mock-up of the candidate window in a scheme's colors.

The first candidate is drawn highlighted. Page arrows are drawn when both
prevpage_color and nextpage_color are set (weasel). Translucent colors are
composited over the stored page background (`rime-scheme prefs
pageBackground dark`), unless --background is given.

Example:
    rime-scheme preview my_scheme.yaml ./tmp/preview.png
    rime-scheme preview my_scheme.yaml ./tmp/dark.png --background dark
"""

import os

from rime_scheme.commands._io import add_file_argument, load_into
from rime_scheme.core.preferences import KEYS, PAGE_BACKGROUNDS
from rime_scheme.core.preview import render_preview
from rime_scheme.core.types import Command

command = Command(name='preview', help='Render a PNG preview of the candidate window.')


@command.arguments
def arguments(parser) -> None:
    add_file_argument(parser)
    parser.add_argument('output', help='PNG path to write')
    parser.add_argument('--background', choices=PAGE_BACKGROUNDS, help='Canvas behind the window for this run')


@command.run
def run(store, args) -> None:
    load_into(store, args.file)
    out_dir = os.path.dirname(args.output)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    background = args.background or store.preferences.get(KEYS['PAGE_BACKGROUND'])
    image = render_preview(store.effective, page_background=background)
    image.save(args.output)
    print(f'{args.output} ({image.width}×{image.height})')
