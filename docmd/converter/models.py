from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class RawTextRun(BaseModel):
    """One text run as delivered by a document source, before glyph decoding."""

    model_config = ConfigDict(frozen=True)

    text: str
    font: str = ""
    font_size: float = 0.0
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: Optional[float] = None


class TextElement(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    font: str = ""
    size: float = 0.0
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: Optional[float] = None

    @field_validator("text")
    @classmethod
    def _text_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("text element must carry decoded text")
        return v

    @property
    def right(self) -> float:
        return self.x + self.width


class TextLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    elements: tuple[TextElement, ...]
    y: float
    font_size: float
    is_bold: bool = False

    @property
    def text(self) -> str:
        return "".join(e.text for e in self.elements)


class LineRole(str, Enum):
    HEADING = "heading"
    LIST_ITEM = "list_item"
    TABLE_ROW = "table_row"
    PARAGRAPH = "paragraph"


class ClassifiedLine(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: TextLine
    role: LineRole
    heading_level: Optional[int] = None  # 1..5, headings only
    list_text: Optional[str] = None  # list items: text with the marker stripped
