import pytest

from docmd.converter.errors import DocumentOpenError, EmptyDocumentError, UnsupportedFormatError
from docmd.converter.models import RawTextRun
from docmd.converter.sources import DocumentSource, JsonRunsSource, open_source


def test_json_dump_roundtrip_keeps_absent_pages(tmp_path):
    pages = [[RawTextRun(text="abc", font="F", font_size=10, x=1, y=2, width=3)], None, []]
    path = JsonRunsSource.dump(pages, tmp_path / "runs.json")
    with open_source(path) as src:
        assert isinstance(src, JsonRunsSource)
        assert src.page_count == 3
        assert src.native_decoder == "offset"
        got = list(src.pages())
    assert got[1] is None
    assert got[2] == []
    assert got[0][0].text == "abc"
    assert got[0][0].height is None


def test_unknown_extension_is_rejected(tmp_path):
    with pytest.raises(UnsupportedFormatError):
        open_source(tmp_path / "report.docx")


def test_extension_match_is_case_insensitive(tmp_path):
    path = tmp_path / "RUNS.JSON"
    path.write_text('{"pages": [[]]}', encoding="utf-8")
    assert isinstance(open_source(path), JsonRunsSource)


def test_malformed_dump_fails_to_open(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"pages": [[{"font": "no text"}]]}', encoding="utf-8")
    with pytest.raises(DocumentOpenError):
        open_source(path)


def test_missing_dump_fails_to_open(tmp_path):
    with pytest.raises(DocumentOpenError):
        open_source(tmp_path / "missing.json")


def test_dump_without_pages_is_empty(tmp_path):
    path = tmp_path / "empty.json"
    path.write_text('{"pages": []}', encoding="utf-8")
    with pytest.raises(EmptyDocumentError):
        open_source(path)


def test_source_base_cannot_be_instantiated(tmp_path):
    with pytest.raises(TypeError):
        DocumentSource(tmp_path / "x.pdf")
