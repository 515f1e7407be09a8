from __future__ import annotations

from typing import Optional

from .models import ClassifiedLine, LineRole, TextLine

_BULLETS = ("•", "▪", "‣", "◦", "-", "–")

# Minimum horizontal gap between neighbouring runs for a line to read as columns.
_TABLE_MIN_GAP = 5.0


def is_heading(line: TextLine, previous: Optional[TextLine]) -> bool:
    if line.font_size > 14:
        return True
    if line.is_bold and line.font_size > 12:
        return True
    if previous is not None and line.font_size > previous.font_size + 2:
        return True
    return False


def heading_level(line: TextLine) -> int:
    size = line.font_size
    if size >= 20:
        return 1
    if size >= 18:
        return 2
    if size >= 16:
        return 3
    if size >= 14:
        return 4
    return 5


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def _marker_length(text: str) -> int:
    """Length of the leading list marker of trimmed text, 0 when there is none."""
    t = text.strip()
    if not t:
        return 0
    for b in _BULLETS:
        if t.startswith(b):
            return len(b)
    if len(t) > 2 and t[1] == "." and _is_ascii_alnum(t[0]):
        return 2
    return 0


def is_list_item(text: str) -> bool:
    return _marker_length(text) > 0


def strip_list_marker(text: str) -> str:
    t = text.strip()
    return t[_marker_length(t):].strip()


def is_table_row(line: TextLine) -> bool:
    els = line.elements
    if len(els) < 2:
        return False
    for left, right in zip(els, els[1:]):
        if right.x - left.right < _TABLE_MIN_GAP:
            return False
    return True


def classify_line(
    line: TextLine,
    previous: Optional[TextLine] = None,
    table_row: Optional[bool] = None,
) -> ClassifiedLine:
    """
    Assign a role to one line. Rules are tried in a fixed order:
    heading, list item, table row, paragraph.

    ``table_row`` takes an already computed ``is_table_row`` result.
    """
    if is_heading(line, previous):
        return ClassifiedLine(line=line, role=LineRole.HEADING, heading_level=heading_level(line))
    text = line.text
    if is_list_item(text):
        return ClassifiedLine(line=line, role=LineRole.LIST_ITEM, list_text=strip_list_marker(text))
    if table_row is None:
        table_row = is_table_row(line)
    if table_row:
        return ClassifiedLine(line=line, role=LineRole.TABLE_ROW)
    return ClassifiedLine(line=line, role=LineRole.PARAGRAPH)
