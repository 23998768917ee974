"""Stage 2: UTF-8 validity check."""

from __future__ import annotations

import codecs

from textcodec.enums import EncodingTag


def is_valid_utf8(data: bytes, final: bool = True) -> bool:
    """Return True if the whole of *data* decodes as strict UTF-8.

    Overlong forms, surrogates and code points above U+10FFFF are always
    rejected.  A truncated trailing sequence is rejected only when *final*
    is true; pass ``final=False`` for a prefix cut from a longer buffer.
    """
    try:
        codecs.getincrementaldecoder("utf-8")().decode(data, final=final)
    except UnicodeDecodeError:
        return False
    return True


def detect_utf8(data: bytes) -> EncodingTag | None:
    """Return :attr:`EncodingTag.UTF8` if *data* is entirely valid UTF-8.

    :param data: The raw byte data to examine.  Empty input is valid.
    :returns: The UTF-8 tag, or ``None``.
    """
    if is_valid_utf8(data):
        return EncodingTag.UTF8
    return None
