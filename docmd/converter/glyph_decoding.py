from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import Optional

# Glyph-index offset observed for the subset fonts the converter was first
# built against. Not verified for other font families.
DEFAULT_GLYPH_OFFSET = 29


def decode_pdf_text(raw: str, offset: int = DEFAULT_GLYPH_OFFSET) -> str:
    """
    Shift every code point of a raw run by ``offset`` and keep what is printable.

    CR and LF (after shifting) become a single newline; everything else that is
    not printable is dropped. An empty result means the fragment carries no text.
    """
    out: list[str] = []
    for ch in raw or "":
        cp = ord(ch) + offset
        if cp < 0 or cp > sys.maxunicode:
            continue
        decoded = chr(cp)
        if decoded.isprintable():
            out.append(decoded)
        elif cp in (0x0A, 0x0D):
            out.append("\n")
    return "".join(out)


class GlyphDecoder(ABC):
    name = "base"

    @abstractmethod
    def decode(self, raw: str) -> str:
        raise NotImplementedError


class OffsetGlyphDecoder(GlyphDecoder):
    name = "offset"

    def __init__(self, offset: int = DEFAULT_GLYPH_OFFSET):
        self.offset = int(offset)

    def decode(self, raw: str) -> str:
        return decode_pdf_text(raw, self.offset)


class IdentityGlyphDecoder(OffsetGlyphDecoder):
    """For sources whose runs are already Unicode (e.g. PyMuPDF spans)."""

    name = "identity"

    def __init__(self):
        super().__init__(0)


class FontDecoderTable:
    """
    Chooses a decoder per font name.

    Overrides are matched as case-insensitive substrings of the font name, in
    registration order; fonts without a match use the default decoder.
    """

    def __init__(self, default: Optional[GlyphDecoder] = None):
        self.default = default or OffsetGlyphDecoder()
        self._overrides: list[tuple[str, GlyphDecoder]] = []

    def register(self, font_pattern: str, decoder: GlyphDecoder) -> "FontDecoderTable":
        self._overrides.append((font_pattern.lower(), decoder))
        return self

    def for_font(self, font: str) -> GlyphDecoder:
        f = (font or "").lower()
        for pat, dec in self._overrides:
            if pat and pat in f:
                return dec
        return self.default

    def decode(self, raw: str, font: str = "") -> str:
        return self.for_font(font).decode(raw)


def build_decoder_table(name: str = "offset", offset: int = DEFAULT_GLYPH_OFFSET) -> FontDecoderTable:
    n = (name or "offset").strip().lower()
    if n == "identity":
        return FontDecoderTable(IdentityGlyphDecoder())
    if n == "offset":
        return FontDecoderTable(OffsetGlyphDecoder(offset))
    raise ValueError(f"unknown glyph decoder: {name!r}")
