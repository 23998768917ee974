"""Stage 0: Binary content detection."""

from __future__ import annotations

import logging

from textcodec._utils import DEFAULT_THRESHOLDS, Thresholds, _validate_max_bytes
from textcodec.pipeline.utf8 import is_valid_utf8

logger = logging.getLogger(__name__)

# Container formats recognised from their leading bytes.  A match is
# authoritative even when the rest of the buffer would pass as text.
_SIGNATURES: tuple[tuple[bytes, str], ...] = (
    (b"\x89PNG", "png"),
    (b"\xff\xd8\xff", "jpeg"),
    (b"GIF8", "gif"),
    (b"%PDF", "pdf"),
    (b"PK", "zip"),
    (b"MZ", "pe"),
)

# Control bytes 0x00-0x08 and 0x0E-0x1F (tab, LF, VT, FF and CR excluded).
# len(data) - len(data.translate(None, _CONTROL_DELETE)) counts them in one
# C-level pass.
_CONTROL_DELETE = bytes(range(0x09)) + bytes(range(0x0E, 0x20))


def match_signature(data: bytes) -> str | None:
    """Return the name of the container format *data* starts with, if any."""
    for magic, name in _SIGNATURES:
        if data.startswith(magic):
            return name
    return None


def is_binary(
    data: bytes,
    max_bytes: int | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Return True if *data* appears to be binary (not text) content.

    :param data: The raw byte data to examine.
    :param max_bytes: When given, only this many leading bytes are examined.
        Signature and NUL verdicts never flip from binary to text as the
        prefix grows; the control-byte ratio is approximate across prefixes.
        A multi-byte UTF-8 sequence split by the cut still counts as valid.
    :param thresholds: NUL and control-byte limits.
    """
    truncated = False
    if max_bytes is not None:
        _validate_max_bytes(max_bytes)
        truncated = len(data) > max_bytes
        data = data[:max_bytes]
    if not data:
        return False

    signature = match_signature(data)
    if signature is not None:
        logger.debug("binary: %s signature", signature)
        return True

    # Truncated final sequence from max_bytes slicing: treat as valid.
    if is_valid_utf8(data, final=not truncated):
        return False

    length = len(data)
    nul_count = data.count(0)
    if nul_count > thresholds.nul_limit(length):
        logger.debug("binary: %d NUL bytes in %d", nul_count, length)
        return True

    control_count = length - len(data.translate(None, _CONTROL_DELETE))
    if control_count / length > thresholds.control_ratio:
        logger.debug("binary: %d control bytes in %d", control_count, length)
        return True
    return False
