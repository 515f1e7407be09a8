from __future__ import annotations

import os
from dataclasses import dataclass

DECODER_CHOICES = ("auto", "offset", "identity")


@dataclass
class ConvertConfig:
    # "auto" picks the decoder the document source declares as native.
    decoder: str = "auto"
    decode_offset: int = 29
    # 0.0 groups fragments into a line only on exactly equal y.
    line_tolerance: float = 0.0
    workers: int = 1
    page_separator: str = "---"
    log_level: str = "INFO"


def _env(name: str) -> str:
    v = (os.environ.get(name) or "").strip()
    # Users often set env vars with quotes (e.g. cmd.exe: set DOCMD_DECODER="identity").
    if (v.startswith('"') and v.endswith('"')) or (v.startswith("'") and v.endswith("'")):
        v = v[1:-1].strip()
    return v


def load_config() -> ConvertConfig:
    cfg = ConvertConfig()

    decoder = _env("DOCMD_DECODER").lower()
    if decoder:
        if decoder not in DECODER_CHOICES:
            raise ValueError(f"DOCMD_DECODER must be one of {', '.join(DECODER_CHOICES)}, got {decoder!r}")
        cfg.decoder = decoder

    if _env("DOCMD_DECODE_OFFSET"):
        cfg.decode_offset = int(_env("DOCMD_DECODE_OFFSET"))
    if _env("DOCMD_LINE_TOLERANCE"):
        cfg.line_tolerance = max(0.0, float(_env("DOCMD_LINE_TOLERANCE")))
    if _env("DOCMD_WORKERS"):
        cfg.workers = max(1, int(_env("DOCMD_WORKERS")))
    if _env("DOCMD_LOG_LEVEL"):
        cfg.log_level = _env("DOCMD_LOG_LEVEL").upper()

    return cfg
