"""Conversion between byte buffers and text for each supported encoding.

Only the BOM-tagged decode is strict.  The other paths substitute a
placeholder for anything they cannot represent (U+FFFD when decoding,
``?`` when encoding) so that damaged files still open and corruption shows
up as visible characters the user can correct.
"""

from __future__ import annotations

import logging

from textcodec._utils import DEFAULT_THRESHOLDS, Thresholds, _as_bytes
from textcodec.enums import EncodingTag
from textcodec.errors import BinaryFileError, InvalidUtf8BomError
from textcodec.pipeline import DecodedText
from textcodec.pipeline.binary import is_binary, match_signature
from textcodec.pipeline.bom import UTF8_BOM
from textcodec.pipeline.orchestrator import detect_encoding

logger = logging.getLogger(__name__)

# Python codec used for the Shift-JIS tag.  cp932 (Windows-31J) is the
# table Windows and the WHATWG encoding standard use for "Shift_JIS"; it is
# a superset of JIS X 0208 Shift-JIS with the NEC and IBM extensions.
SHIFT_JIS_CODEC = "cp932"

_REPLACEMENT_CHAR = "\ufffd"


def decode(data: bytes | bytearray, encoding: EncodingTag | str) -> str:
    """Decode *data* according to *encoding*.

    :param data: The raw bytes, including any byte-order mark.
    :param encoding: The tag (or its label) to decode with.
    :returns: The decoded text, without a byte-order mark.
    :raises InvalidUtf8BomError: If *encoding* is ``UTF8_BOM`` and the bytes
        following the first three are not strict UTF-8.
    """
    data = _as_bytes(data)
    tag = EncodingTag.from_label(encoding)

    if tag is EncodingTag.UTF8_BOM:
        # Exactly three bytes are dropped whatever they are; a forced BOM
        # tag means the caller vouches for the prefix.
        payload = data[len(UTF8_BOM) :]
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidUtf8BomError(e.start, e.reason) from e

    if tag is EncodingTag.SHIFT_JIS:
        text = data.decode(SHIFT_JIS_CODEC, errors="replace")
        if _REPLACEMENT_CHAR in text:
            logger.debug(
                "Shift-JIS decode replaced %d unmappable sequences",
                text.count(_REPLACEMENT_CHAR),
            )
        return text

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.debug("invalid UTF-8 at offset %d, decoding lossily", e.start)
        return data.decode("utf-8", errors="replace")


def encode(text: str, encoding: EncodingTag | str) -> bytes:
    """Encode *text* according to *encoding*.  Never fails.

    :param text: The text to encode.
    :param encoding: The tag (or its label) to encode with.
    :returns: The encoded bytes, prefixed with a BOM for ``UTF8_BOM``.
    """
    tag = EncodingTag.from_label(encoding)

    if tag is EncodingTag.SHIFT_JIS:
        return text.encode(SHIFT_JIS_CODEC, errors="replace")

    # "replace" only matters for lone surrogates, which no decode produces.
    body = text.encode("utf-8", errors="replace")
    if tag is EncodingTag.UTF8_BOM:
        return UTF8_BOM + body
    return body


def decode_bytes(
    data: bytes | bytearray,
    encoding: EncodingTag | str | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> DecodedText:
    """Run the full read path over an in-memory buffer.

    The buffer is classified first and rejected if binary.  Otherwise the
    encoding is detected, unless *encoding* forces one, and the bytes are
    decoded.

    :param data: The raw bytes to read.
    :param encoding: Optional forced tag (or label); skips detection.
    :param thresholds: Heuristic thresholds for classification and detection.
    :returns: The text together with the tag it was decoded from.
    :raises BinaryFileError: If the buffer is classified as binary.
    :raises InvalidUtf8BomError: If a BOM-tagged buffer is not strict UTF-8.
    """
    data = _as_bytes(data)
    if is_binary(data, thresholds=thresholds):
        raise BinaryFileError(signature=match_signature(data))

    if encoding is None:
        tag = detect_encoding(data, thresholds)
    else:
        tag = EncodingTag.from_label(encoding)
    return DecodedText(text=decode(data, tag), encoding=tag)
