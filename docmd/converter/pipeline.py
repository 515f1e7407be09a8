from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, Optional, Sequence

from ..config import ConvertConfig
from .glyph_decoding import FontDecoderTable, build_decoder_table
from .layout_analysis import build_text_elements, group_elements_into_lines
from .markdown_emitter import render_lines
from .models import RawTextRun
from .sources import DocumentSource, open_source

logger = logging.getLogger(__name__)


def render_page(
    runs: Optional[Iterable[RawTextRun]],
    decoders: Optional[FontDecoderTable] = None,
    line_tolerance: float = 0.0,
) -> str:
    """Markdown for one page; absent page content renders as an empty string."""
    if runs is None:
        return ""
    elements = build_text_elements(runs, decoders)
    if not elements:
        return ""
    lines = group_elements_into_lines(elements, tolerance=line_tolerance)
    return render_lines(lines)


def join_pages(rendered: Sequence[str], separator: str = "---") -> str:
    """
    Join rendered pages in order. Whitespace-only pages are dropped; every
    kept page except the document's final page is followed by a separator.
    """
    out: list[str] = []
    last = len(rendered) - 1
    for i, md in enumerate(rendered):
        if not md.strip():
            continue
        out.append(md)
        out.append("\n\n")
        if i < last:
            out.append(separator + "\n\n")
    return "".join(out)


class PDFConverter:
    def __init__(self, cfg: Optional[ConvertConfig] = None):
        self.cfg = cfg or ConvertConfig()

    def _decoders_for(self, source: DocumentSource) -> FontDecoderTable:
        name = self.cfg.decoder
        if name == "auto":
            name = source.native_decoder
        return build_decoder_table(name, self.cfg.decode_offset)

    def render_document(self, pages: Sequence[Optional[list[RawTextRun]]], decoders: FontDecoderTable) -> str:
        total = len(pages)
        tol = self.cfg.line_tolerance

        def work(i: int) -> str:
            logger.debug("Rendering page %d/%d", i + 1, total)
            return render_page(pages[i], decoders, tol)

        if self.cfg.workers > 1 and total > 1:
            with ThreadPoolExecutor(max_workers=self.cfg.workers) as ex:
                # map() yields in submission order, i.e. by page index.
                rendered = list(ex.map(work, range(total)))
        else:
            rendered = [work(i) for i in range(total)]
        return join_pages(rendered, self.cfg.page_separator)

    def convert_to_markdown(self, input_path: Path | str) -> str:
        with open_source(input_path) as source:
            decoders = self._decoders_for(source)
            pages = list(source.pages())
        logger.info("Read %d page(s) from %s", len(pages), input_path)
        return self.render_document(pages, decoders)

    def convert(self, input_path: Path | str, output_path: Path | str) -> str:
        md = self.convert_to_markdown(input_path)
        out_file = Path(output_path)
        out_file.write_text(md, encoding="utf-8")
        logger.info("Saved to %s", out_file)
        return md
