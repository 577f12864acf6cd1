"""Render a candidate-window mock-up in a scheme's effective colors.

Layout (horizontal, one row of candidates):

    +--------------------------------------------+
    | ri|me                                      |   preedit
    | [1. prime hint]  2. rime  3. crime    < >  |   candidates
    +--------------------------------------------+

The first candidate is drawn highlighted. Page arrows appear only when
the scheme shows pages. Colors with alpha are composited onto an opaque
canvas (white for the 'light' page background, near-black for 'dark'),
so the returned image is plain RGB.
"""

from PIL import Image, ImageDraw, ImageFont

from rime_scheme.core.color import parse_color
from rime_scheme.core.scheme import EffectiveColors

DEFAULT_CANDIDATES = [('prime', 'hint'), ('rime', ''), ('crime', ''), ('grime', '')]
PREEDIT = ('ri', 'me')

PAD = 8
GAP = 6
ROW_H = 24
BORDER = 2

# Canvas behind the window, keyed by the pageBackground preference.
CANVAS = {'light': (255, 255, 255), 'dark': (30, 30, 30)}


def _rgba(hexa: str) -> tuple[int, int, int, int]:
    ch = parse_color(hexa)
    return (ch['r'], ch['g'], ch['b'], ch['a'])


def _width(draw: ImageDraw.ImageDraw, text: str, font) -> int:
    if not text:
        return 0
    bbox = draw.textbbox((0, 0), text, font=font)
    return bbox[2] - bbox[0]


def _candidate_cells(draw, font, candidates) -> list[tuple[str, str, str, int]]:
    cells = []
    for i, (text, comment) in enumerate(candidates, start=1):
        label = f'{i}.'
        w = _width(draw, label, font) + 4 + _width(draw, text, font)
        if comment:
            w += 4 + _width(draw, comment, font)
        cells.append((label, text, comment, w + 2 * GAP))
    return cells


def render_preview(
    eff: EffectiveColors,
    candidates: list[tuple[str, str]] | None = None,
    page_background: str = 'light',
) -> Image.Image:
    """Draw the candidate window for `eff` and return it as an RGB image."""
    candidates = candidates or DEFAULT_CANDIDATES
    font = ImageFont.load_default()

    measure = ImageDraw.Draw(Image.new('RGBA', (1, 1)))
    cells = _candidate_cells(measure, font, candidates)
    arrows_w = (2 * _width(measure, '<', font) + 3 * GAP) if eff.show_pages else 0
    width = BORDER * 2 + PAD * 2 + sum(c[3] for c in cells) + GAP * (len(cells) - 1) + arrows_w
    height = BORDER * 2 + PAD * 3 + ROW_H * 2

    # RGBA fills only blend when drawn onto an RGB image.
    img = Image.new('RGB', (width, height), CANVAS.get(page_background, CANVAS['light']))
    draw = ImageDraw.Draw(img, 'RGBA')

    # Window
    draw.rectangle([0, 0, width - 1, height - 1], fill=_rgba(eff.back_color))
    if eff.shadow_color:
        draw.rectangle([BORDER, height - BORDER - 2, width - 1, height - 1], fill=_rgba(eff.shadow_color))
    draw.rectangle([0, 0, width - 1, height - 1], outline=_rgba(eff.border_color), width=BORDER)

    # Preedit: typed part, then the highlighted segment
    x = BORDER + PAD
    y = BORDER + PAD
    typed, active = PREEDIT
    draw.text((x, y + 6), typed, font=font, fill=_rgba(eff.text_color))
    x += _width(draw, typed, font) + 2
    active_w = _width(draw, active, font)
    draw.rectangle([x - 1, y, x + active_w + 1, y + ROW_H - 1], fill=_rgba(eff.hilited_back_color))
    draw.text((x, y + 6), active, font=font, fill=_rgba(eff.hilited_text_color))

    # Candidates
    x = BORDER + PAD
    y = BORDER + PAD * 2 + ROW_H
    for i, (label, text, comment, w) in enumerate(cells):
        box = [x, y, x + w - 1, y + ROW_H - 1]
        if i == 0:
            label_color = (
                eff.hilited_label_color or eff.hilited_candidate_label_color or eff.hilited_candidate_text_color
            )
            text_color = eff.hilited_candidate_text_color
            comment_color = eff.hilited_comment_text_color
            if eff.hilited_candidate_shadow_color:
                shadow = [x + 2, y + 2, x + w + 1, y + ROW_H + 1]
                draw.rectangle(shadow, fill=_rgba(eff.hilited_candidate_shadow_color))
            draw.rectangle(box, fill=_rgba(eff.hilited_candidate_back_color))
            if eff.hilited_candidate_border_color:
                draw.rectangle(box, outline=_rgba(eff.hilited_candidate_border_color))
            if eff.hilited_mark_color:
                draw.rectangle([x, y + 4, x + 2, y + ROW_H - 5], fill=_rgba(eff.hilited_mark_color))
        else:
            label_color = eff.label_color
            text_color = eff.candidate_text_color
            comment_color = eff.comment_text_color
            if eff.candidate_shadow_color:
                draw.rectangle([x + 2, y + 2, x + w + 1, y + ROW_H + 1], fill=_rgba(eff.candidate_shadow_color))
            if eff.candidate_back_color:
                draw.rectangle(box, fill=_rgba(eff.candidate_back_color))
            if eff.candidate_border_color:
                draw.rectangle(box, outline=_rgba(eff.candidate_border_color))

        tx = x + GAP
        draw.text((tx, y + 6), label, font=font, fill=_rgba(label_color))
        tx += _width(draw, label, font) + 4
        draw.text((tx, y + 6), text, font=font, fill=_rgba(text_color))
        if comment:
            tx += _width(draw, text, font) + 4
            draw.text((tx, y + 6), comment, font=font, fill=_rgba(comment_color))
        x += w + GAP

    if eff.show_pages:
        x += GAP
        draw.text((x, y + 6), '<', font=font, fill=_rgba(eff.prevpage_color))
        x += _width(draw, '<', font) + GAP
        draw.text((x, y + 6), '>', font=font, fill=_rgba(eff.nextpage_color))

    return img
