"""Text encoding detection and lossless decode/encode for text files.

Supports UTF-8, UTF-8 with a byte-order mark, and Shift-JIS.
"""

from __future__ import annotations

from textcodec._utils import (
    BINARY_SNIFF_BYTES,
    DEFAULT_THRESHOLDS,
    Thresholds,
    _as_bytes,
)
from textcodec.codec import decode, decode_bytes, encode
from textcodec.enums import EncodingTag
from textcodec.errors import (
    BinaryFileError,
    DecodeError,
    InvalidUtf8BomError,
    TextCodecError,
    UnknownEncodingError,
)
from textcodec.files import is_binary_file, read_text, unique_path, write_text
from textcodec.pipeline import DecodedText
from textcodec.pipeline.binary import is_binary
from textcodec.pipeline.orchestrator import detect_encoding

__version__ = "1.0.0"
__all__ = [
    "BINARY_SNIFF_BYTES",
    "DEFAULT_THRESHOLDS",
    "BinaryFileError",
    "DecodeError",
    "DecodedText",
    "EncodingTag",
    "InvalidUtf8BomError",
    "TextCodecError",
    "Thresholds",
    "UnknownEncodingError",
    "classify",
    "decode",
    "decode_bytes",
    "detect",
    "encode",
    "is_binary",
    "is_binary_file",
    "read_text",
    "unique_path",
    "write_text",
]


def classify(
    byte_str: bytes | bytearray, thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> bool:
    """Return True if *byte_str* is binary content, False if it is text."""
    return is_binary(_as_bytes(byte_str), thresholds=thresholds)


def detect(
    byte_str: bytes | bytearray, thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> EncodingTag:
    """Detect the encoding of the given byte string.

    Does not classify; see :func:`classify` or :func:`decode_bytes`.
    """
    return detect_encoding(_as_bytes(byte_str), thresholds)
