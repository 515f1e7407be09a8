from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional

from pydantic import BaseModel, ValidationError

try:
    import fitz
except ImportError:
    fitz = None

from .errors import DocumentOpenError, EmptyDocumentError, PageExtractionError, UnsupportedFormatError
from .models import RawTextRun

logger = logging.getLogger(__name__)

Page = Optional[list[RawTextRun]]


class DocumentSource(ABC):
    """Produces the pages of one document as ordered lists of raw text runs."""

    extensions: tuple[str, ...] = ()
    native_decoder = "offset"

    def __init__(self, path: Path | str):
        self.path = Path(path)

    @property
    @abstractmethod
    def page_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def pages(self) -> Iterator[Page]:
        raise NotImplementedError

    def close(self) -> None:
        pass

    def __enter__(self) -> "DocumentSource":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class PdfSource(DocumentSource):
    extensions = (".pdf",)
    # PyMuPDF applies the fonts' ToUnicode maps itself.
    native_decoder = "identity"

    def __init__(self, path: Path | str):
        super().__init__(path)
        if fitz is None:
            raise ImportError("PyMuPDF (fitz) not installed.")
        try:
            self._doc = fitz.open(str(self.path))
        except Exception as e:
            raise DocumentOpenError(self.path, e) from e
        if len(self._doc) == 0:
            self._doc.close()
            raise EmptyDocumentError(self.path)

    @property
    def page_count(self) -> int:
        return len(self._doc)

    @staticmethod
    def _page_runs(page) -> list[RawTextRun]:
        # PDF user space puts y=0 at the bottom; keep that convention so the
        # top of the page has the largest y.
        page_h = float(page.rect.height)
        runs: list[RawTextRun] = []
        for b in page.get_text("dict").get("blocks", []):
            for l in b.get("lines", []) or []:
                for s in l.get("spans", []) or []:
                    t = s.get("text") or ""
                    if not t:
                        continue
                    x0, y0, x1, y1 = s["bbox"]
                    baseline = float(s.get("origin", (x0, y1))[1])
                    runs.append(
                        RawTextRun(
                            text=t,
                            font=s.get("font", ""),
                            font_size=float(s.get("size", 0.0)),
                            x=float(x0),
                            y=page_h - baseline,
                            width=float(x1 - x0),
                            height=float(y1 - y0),
                        )
                    )
        return runs

    def pages(self) -> Iterator[Page]:
        for i, page in enumerate(self._doc):
            try:
                runs = self._page_runs(page)
            except Exception as e:
                raise PageExtractionError(i + 1, e) from e
            yield runs

    def close(self) -> None:
        self._doc.close()


class _RunDump(BaseModel):
    pages: list[Optional[list[RawTextRun]]]


class JsonRunsSource(DocumentSource):
    """
    Pre-extracted runs stored as ``{"pages": [[run, ...], null, ...]}``.

    Dumps hold the raw glyph codes of the producing extractor, so the offset
    decoder is the native one.
    """

    extensions = (".json",)
    native_decoder = "offset"

    def __init__(self, path: Path | str):
        super().__init__(path)
        try:
            raw = self.path.read_text(encoding="utf-8")
            self._dump = _RunDump.model_validate_json(raw)
        except (OSError, ValueError, ValidationError) as e:
            raise DocumentOpenError(self.path, e) from e
        if not self._dump.pages:
            raise EmptyDocumentError(self.path)

    @classmethod
    def dump(cls, pages: list[Page], path: Path | str) -> Path:
        out = Path(path)
        payload = {"pages": [None if p is None else [r.model_dump() for r in p] for p in pages]}
        out.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        return out

    @property
    def page_count(self) -> int:
        return len(self._dump.pages)

    def pages(self) -> Iterator[Page]:
        yield from self._dump.pages


SOURCES: tuple[type[DocumentSource], ...] = (PdfSource, JsonRunsSource)


def open_source(path: Path | str) -> DocumentSource:
    p = Path(path)
    ext = p.suffix.lower()
    for cls in SOURCES:
        if ext in cls.extensions:
            logger.debug("opening %s as %s", p, cls.__name__)
            return cls(p)
    raise UnsupportedFormatError(p)
