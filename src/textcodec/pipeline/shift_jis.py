"""Stage 3: Shift-JIS plausibility scoring.

Counts bytes that take part in structurally plausible Shift-JIS
double-byte pairs.  The score is a heuristic: it checks byte ranges only
and never consults the mapping table.
"""

from __future__ import annotations

from textcodec._utils import DEFAULT_THRESHOLDS, Thresholds
from textcodec.enums import EncodingTag


def _is_lead_byte(byte: int) -> bool:
    return 0x81 <= byte <= 0x9F or 0xE0 <= byte <= 0xEF


def _is_trail_byte(byte: int) -> bool:
    return 0x40 <= byte <= 0x7E or 0x80 <= byte <= 0xFC


def shift_jis_score(data: bytes) -> int:
    """Return the number of bytes covered by plausible Shift-JIS pairs.

    Each lead byte followed by a valid trail byte adds 2 and the scan skips
    over the pair.  Any other byte, including a lead byte at the very end of
    the buffer, advances the scan by one without scoring.
    """
    score = 0
    i = 0
    length = len(data)
    while i < length:
        if _is_lead_byte(data[i]) and i + 1 < length and _is_trail_byte(data[i + 1]):
            score += 2
            i += 2
            continue
        i += 1
    return score


def shift_jis_ratio(data: bytes) -> float:
    """Return :func:`shift_jis_score` as a fraction of ``len(data)``."""
    if not data:
        return 0.0
    return shift_jis_score(data) / len(data)


def detect_shift_jis(
    data: bytes, thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> EncodingTag | None:
    """Return :attr:`EncodingTag.SHIFT_JIS` if enough of *data* scores as pairs.

    :param data: The raw byte data to examine.
    :param thresholds: Supplies the ``shift_jis_ratio`` cut-off, which the
        ratio must strictly exceed.
    :returns: The Shift-JIS tag, or ``None``.
    """
    if not data:
        return None
    if shift_jis_score(data) > len(data) * thresholds.shift_jis_ratio:
        return EncodingTag.SHIFT_JIS
    return None
