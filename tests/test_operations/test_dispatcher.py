"""Tests for operations/dispatcher.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from filelist.models import Config, ConversionPolicy
from filelist.operations import OPERATION_REGISTRY, OperationDispatcher, on_load


@pytest.fixture(autouse=True)
def _loaded() -> None:
    on_load()


class TestOperationDispatcher:
    def test_invokes_by_name(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("x")
        dispatcher = OperationDispatcher()
        assert dispatcher.invoke("list_as_strings", str(tmp_path)) == ["a.txt"]

    def test_invokes_by_host_name(self, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_text("x")
        dispatcher = OperationDispatcher()
        assert dispatcher.invoke("nativeFileListByte", str(tmp_path)) == [b"a.txt"]

    def test_failure_is_none(self) -> None:
        dispatcher = OperationDispatcher()
        assert dispatcher.invoke("list_as_strings", "/nonexistent/dir") is None

    def test_unknown_operation_raises(self) -> None:
        dispatcher = OperationDispatcher()
        with pytest.raises(LookupError, match="unknown operation"):
            dispatcher.invoke("nonexistent", "/")

    def test_passes_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config = Config(conversion_policy=ConversionPolicy.ABORT)
        fake = MagicMock(return_value=["x"])
        monkeypatch.setattr(OPERATION_REGISTRY["list_as_strings"], "fn", fake)

        result = OperationDispatcher(config).invoke("list_as_strings", "/some/dir")

        fake.assert_called_once_with("/some/dir", config)
        assert result == ["x"]

    def test_default_config(self) -> None:
        assert OperationDispatcher().config == Config()
