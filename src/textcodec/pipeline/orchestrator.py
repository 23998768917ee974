"""Pipeline orchestrator: runs the detection stages in sequence."""

from __future__ import annotations

import logging

from textcodec._utils import DEFAULT_THRESHOLDS, Thresholds
from textcodec.enums import EncodingTag
from textcodec.pipeline.bom import detect_bom
from textcodec.pipeline.shift_jis import detect_shift_jis
from textcodec.pipeline.utf8 import detect_utf8

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes, thresholds: Thresholds = DEFAULT_THRESHOLDS
) -> EncodingTag:
    """Return the most likely encoding of *data*.

    Binary classification is not part of detection; callers that read from
    storage run :func:`~textcodec.pipeline.binary.is_binary` first.

    :param data: The raw byte data to analyze.
    :param thresholds: Supplies the Shift-JIS ratio cut-off.
    :returns: The detected tag.  Never ``None``: UTF-8 is the fallback.
    """
    # Stage 1: BOM is authoritative.
    result = detect_bom(data)
    if result is not None:
        logger.debug("detected %s from byte-order mark", result)
        return result

    # Stage 2: exact UTF-8 validation before any heuristic.
    result = detect_utf8(data)
    if result is not None:
        return result

    # Stage 3: statistical Shift-JIS scoring.
    result = detect_shift_jis(data, thresholds)
    if result is not None:
        logger.debug("detected %s from pair score", result)
        return result

    logger.debug("invalid UTF-8 with low Shift-JIS score, falling back to UTF-8")
    return EncodingTag.UTF8
