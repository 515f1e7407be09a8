import pytest

from docmd.config import ConvertConfig, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for k in ("DOCMD_DECODER", "DOCMD_DECODE_OFFSET", "DOCMD_LINE_TOLERANCE", "DOCMD_WORKERS", "DOCMD_LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)


def test_defaults():
    cfg = load_config()
    assert cfg == ConvertConfig()
    assert cfg.decoder == "auto"
    assert cfg.decode_offset == 29
    assert cfg.line_tolerance == 0.0
    assert cfg.workers == 1


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("DOCMD_DECODER", '"identity"')
    monkeypatch.setenv("DOCMD_DECODE_OFFSET", "31")
    monkeypatch.setenv("DOCMD_LINE_TOLERANCE", "0.5")
    monkeypatch.setenv("DOCMD_WORKERS", "0")
    monkeypatch.setenv("DOCMD_LOG_LEVEL", "debug")
    cfg = load_config()
    assert cfg.decoder == "identity"
    assert cfg.decode_offset == 31
    assert cfg.line_tolerance == 0.5
    assert cfg.workers == 1
    assert cfg.log_level == "DEBUG"


def test_unknown_decoder_is_rejected(monkeypatch):
    monkeypatch.setenv("DOCMD_DECODER", "rot13")
    with pytest.raises(ValueError):
        load_config()
