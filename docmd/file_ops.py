from __future__ import annotations

import os
from pathlib import Path


def file_exists(path_like: Path | str) -> bool:
    try:
        return Path(path_like).expanduser().exists()
    except OSError:
        return False


def ensure_dir(path_like: Path | str) -> Path:
    p = Path(path_like)
    p.mkdir(parents=True, exist_ok=True)
    return p


def get_output_path(input_path: Path | str, output_option: str | None = None) -> Path:
    """
    Where the Markdown for ``input_path`` goes.

    No option: ``<stem>.md`` in the working directory. An existing directory:
    ``<dir>/<stem>.md``. Anything else is taken as the output file itself.
    """
    stem = Path(input_path).stem
    if not output_option:
        return Path(stem + ".md")
    opt = Path(output_option).expanduser()
    if os.path.isdir(opt):
        return opt / (stem + ".md")
    return opt
