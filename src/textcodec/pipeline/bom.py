"""Stage 1: UTF-8 byte-order mark detection."""

from __future__ import annotations

from textcodec.enums import EncodingTag

UTF8_BOM: bytes = b"\xef\xbb\xbf"


def detect_bom(data: bytes) -> EncodingTag | None:
    """Return :attr:`EncodingTag.UTF8_BOM` if *data* starts with a UTF-8 BOM."""
    if data.startswith(UTF8_BOM):
        return EncodingTag.UTF8_BOM
    return None
