"""Tests for src/filelist/config.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from filelist.config import load_config
from filelist.models import ByteDisplay, ConversionPolicy


def _write_toml(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "FILELIST_TEXT_ENCODING",
        "FILELIST_CONVERSION_POLICY",
        "FILELIST_BYTE_DISPLAY",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadConfig:
    def test_defaults(self) -> None:
        cfg = load_config()
        assert cfg.text_encoding == "utf-8"
        assert cfg.conversion_policy == ConversionPolicy.SKIP
        assert cfg.byte_display == ByteDisplay.ESCAPE

    def test_defaults_without_default_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr("filelist.config._DEFAULT_CONFIG_PATH", tmp_path / "noexist.toml")
        cfg = load_config()
        assert cfg.text_encoding == "utf-8"
        assert cfg.conversion_policy == ConversionPolicy.SKIP

    def test_loads_from_toml(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "my_config.toml"
        _write_toml(
            cfg_file,
            """
text_encoding = "latin-1"
conversion_policy = "abort"
byte_display = "hex"
""",
        )
        cfg = load_config(config_path=cfg_file)
        assert cfg.text_encoding == "latin-1"
        assert cfg.conversion_policy == ConversionPolicy.ABORT
        assert cfg.byte_display == ByteDisplay.HEX

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILELIST_CONVERSION_POLICY", "skip")
        monkeypatch.setenv("FILELIST_TEXT_ENCODING", "utf-16")
        cfg_file = tmp_path / "cfg.toml"
        _write_toml(cfg_file, 'conversion_policy = "abort"\n')
        cfg = load_config(config_path=cfg_file)
        # Env var wins.
        assert cfg.conversion_policy == ConversionPolicy.SKIP
        assert cfg.text_encoding == "utf-16"

    def test_byte_display_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILELIST_BYTE_DISPLAY", "hex")
        assert load_config().byte_display == ByteDisplay.HEX

    def test_missing_config_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(config_path=Path("/nonexistent/path/config.toml"))

    def test_unknown_encoding_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILELIST_TEXT_ENCODING", "no-such-codec")
        with pytest.raises(ValueError, match="encoding"):
            load_config()

    def test_unknown_policy_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FILELIST_CONVERSION_POLICY", "retry")
        with pytest.raises(ValueError, match="policy"):
            load_config()

    def test_unknown_byte_display_raises(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "cfg.toml"
        _write_toml(cfg_file, 'byte_display = "base64"\n')
        with pytest.raises(ValueError, match="byte display"):
            load_config(config_path=cfg_file)

    @pytest.mark.parametrize("codec", ["rot13", "hex", "base64", "zlib"])
    def test_non_text_codec_raises(
        self, codec: str, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("FILELIST_TEXT_ENCODING", codec)
        with pytest.raises(ValueError, match="text encoding"):
            load_config()
