from .runner import main
from .pipeline import PDFConverter, render_page, join_pages
from ..config import ConvertConfig

__all__ = ["PDFConverter", "ConvertConfig", "render_page", "join_pages", "main"]
