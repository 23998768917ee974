"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

JAPANESE_TEXT = "これはテストです。日本語のテキスト。"


@pytest.fixture
def sjis_bytes() -> bytes:
    """Japanese sample text encoded as Shift-JIS."""
    return JAPANESE_TEXT.encode("cp932")


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    """Return a factory that writes *data* to ``tmp_path / name``."""

    def _make(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _make
