from __future__ import annotations

from typing import Iterable, Optional

from .glyph_decoding import FontDecoderTable
from .models import RawTextRun, TextElement, TextLine

_BOLD_MARKERS = ("bold", "black", "heavy")


def is_bold_font(font: str) -> bool:
    f = (font or "").lower()
    return any(m in f for m in _BOLD_MARKERS)


def build_text_elements(runs: Iterable[RawTextRun], decoders: Optional[FontDecoderTable] = None) -> list[TextElement]:
    """Decode raw runs; runs that decode to nothing are dropped."""
    table = decoders or FontDecoderTable()
    elements: list[TextElement] = []
    for r in runs:
        text = table.decode(r.text, r.font)
        if not text:
            continue
        elements.append(
            TextElement(
                text=text,
                font=r.font,
                size=r.font_size,
                x=r.x,
                y=r.y,
                width=r.width,
                height=r.height,
            )
        )
    return elements


def _make_line(y: float, group: list[TextElement]) -> TextLine:
    ordered = sorted(group, key=lambda e: e.x)
    first = ordered[0]
    return TextLine(
        elements=tuple(ordered),
        y=y,
        font_size=first.size,
        is_bold=is_bold_font(first.font),
    )


def _group_exact(elements: list[TextElement]) -> dict[float, list[TextElement]]:
    groups: dict[float, list[TextElement]] = {}
    for e in elements:
        groups.setdefault(e.y, []).append(e)
    return groups


def _group_banded(elements: list[TextElement], tolerance: float) -> dict[float, list[TextElement]]:
    # Walk top-down; the first (highest) y of a band is its anchor and key.
    groups: dict[float, list[TextElement]] = {}
    anchor: Optional[float] = None
    for e in sorted(elements, key=lambda e: -e.y):
        if anchor is None or (anchor - e.y) > tolerance:
            anchor = e.y
        groups.setdefault(anchor, []).append(e)
    return groups


def group_elements_into_lines(elements: Iterable[TextElement], tolerance: float = 0.0) -> list[TextLine]:
    """
    Group elements sharing a y coordinate into lines, ordered top of page first.

    With ``tolerance`` 0 the y values must be exactly equal; a positive
    tolerance merges elements whose y lies within that distance of a line's
    topmost element.
    """
    items = list(elements)
    if not items:
        return []
    if tolerance and tolerance > 0:
        groups = _group_banded(items, float(tolerance))
    else:
        groups = _group_exact(items)
    lines = [_make_line(y, g) for y, g in groups.items()]
    lines.sort(key=lambda ln: ln.y, reverse=True)
    return lines
