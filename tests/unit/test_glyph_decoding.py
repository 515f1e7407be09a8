import sys

import pytest

from docmd.converter.glyph_decoding import (
    FontDecoderTable,
    GlyphDecoder,
    IdentityGlyphDecoder,
    OffsetGlyphDecoder,
    build_decoder_table,
    decode_pdf_text,
)


def _encode(s, offset=29):
    return "".join(chr(ord(c) - offset) for c in s)


def test_offset_recovers_text():
    assert decode_pdf_text(_encode("Hello World")) == "Hello World"


def test_non_printable_results_are_dropped():
    # 0 + 29 is U+001D (group separator), not printable
    assert decode_pdf_text("\x00" + _encode("ok")) == "ok"


def test_empty_input_decodes_to_empty():
    assert decode_pdf_text("") == ""
    assert decode_pdf_text("\x00\x01") == ""


def test_code_points_beyond_unicode_are_dropped():
    assert decode_pdf_text(chr(sys.maxunicode)) == ""


def test_carriage_return_and_line_feed_become_newline():
    assert decode_pdf_text("a\rb\nc", offset=0) == "a\nb\nc"


def test_identity_decoder_keeps_unicode():
    assert IdentityGlyphDecoder().decode("Café – 3") == "Café – 3"


def test_font_table_overrides_by_substring():
    table = FontDecoderTable(OffsetGlyphDecoder()).register("cidfont", IdentityGlyphDecoder())
    assert table.for_font("ABCDEF+CIDFont-Regular").name == "identity"
    assert table.for_font("Helvetica").name == "offset"
    assert table.decode("plain", "XYZ+CIDFont") == "plain"
    assert table.decode(_encode("plain"), "Helvetica") == "plain"


def test_build_decoder_table():
    assert build_decoder_table("identity").default.name == "identity"
    offset_table = build_decoder_table("offset", 3)
    assert offset_table.decode("^") == "a"


def test_decoder_base_is_abstract():
    with pytest.raises(TypeError):
        GlyphDecoder()
