from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from .block_classifier import classify_line, is_table_row
from .models import ClassifiedLine, LineRole, TextLine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmitterState:
    in_list: bool = False
    previous: Optional[TextLine] = None
    # Whether the raw preceding line (blank or not) reads as a table row.
    previous_table_row: bool = False


def _header_separator(line: TextLine) -> str:
    return "|" + " --- |" * len(line.elements) + "\n"


def emit_line(state: EmitterState, cl: ClassifiedLine, index: int) -> tuple[EmitterState, list[str]]:
    """Markdown parts for one classified line and the state after it."""
    line = cl.line
    text = line.text

    if cl.role is LineRole.HEADING:
        parts = ["#" * int(cl.heading_level or 5) + " " + text + "\n"]
        return replace(state, in_list=False, previous=line), parts

    if cl.role is LineRole.LIST_ITEM:
        parts = [] if state.in_list else ["\n"]
        parts.append("- " + (cl.list_text or "") + "\n")
        return replace(state, in_list=True, previous=line), parts

    if cl.role is LineRole.TABLE_ROW:
        logger.debug("line at y=%s reads as a table row", line.y)
        parts = [] if state.previous_table_row else ["\n"]
        parts.append("| " + text + " |\n")
        # Header separator follows the first line of the page, not of each table.
        if index == 0:
            parts.append(_header_separator(line))
        return replace(state, in_list=False, previous=line), parts

    parts = ["\n"] if state.in_list else []
    parts.append(text + "\n\n")
    return replace(state, in_list=False, previous=line), parts


def render_lines(lines: Sequence[TextLine]) -> str:
    """
    Render one page's ordered lines to Markdown.

    Blank lines are skipped and never become the previous line that heading
    detection compares against. The same input always yields the same output.
    """
    state = EmitterState()
    out: list[str] = []
    for index, line in enumerate(lines):
        table_row = is_table_row(line)
        if line.text.strip():
            state, parts = emit_line(state, classify_line(line, state.previous, table_row=table_row), index)
            out.extend(parts)
        state = replace(state, previous_table_row=table_row)
    return "".join(out)
