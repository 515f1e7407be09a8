from __future__ import annotations

from pathlib import Path
from typing import Optional


class DocmdError(Exception):
    """Base class for conversion failures surfaced to the caller."""


class UnsupportedFormatError(DocmdError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"unsupported file type: {self.path.suffix or '<none>'}")


class InputNotFoundError(DocmdError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"input file does not exist: {self.path}")


class DocumentOpenError(DocmdError):
    def __init__(self, path: Path | str, cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"failed to open document {self.path}: {cause}")


class EmptyDocumentError(DocmdError):
    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"document contains no pages: {self.path}")


class PageExtractionError(DocmdError):
    def __init__(self, page_number: int, cause: BaseException):
        self.page_number = page_number
        self.cause = cause
        super().__init__(f"failed to extract text from page {page_number}: {cause}")
