"""File-level read and write operations for host applications.

Nothing here catches :class:`OSError`; open and read failures reach the
caller unchanged, with their ``errno`` and ``filename``.
"""

from __future__ import annotations

import datetime
import logging
import os
from pathlib import Path

from textcodec._utils import (
    BINARY_SNIFF_BYTES,
    DEFAULT_THRESHOLDS,
    Thresholds,
    _validate_max_bytes,
)
from textcodec.codec import decode_bytes, encode
from textcodec.enums import EncodingTag
from textcodec.errors import BinaryFileError
from textcodec.pipeline import DecodedText
from textcodec.pipeline.binary import is_binary

logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


def read_text(
    path: StrPath,
    encoding: EncodingTag | str | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> DecodedText:
    """Read *path* and decode it as text.

    :param path: The file to read.
    :param encoding: Optional forced tag (or label); skips detection.
    :param thresholds: Heuristic thresholds for classification and detection.
    :returns: The text and the tag to pass to :func:`write_text` on save.
    :raises OSError: If the file cannot be read.
    :raises BinaryFileError: If the content is classified as binary.
    :raises InvalidUtf8BomError: If BOM-tagged content is not strict UTF-8.
    """
    data = Path(path).read_bytes()
    try:
        result = decode_bytes(data, encoding, thresholds)
    except BinaryFileError as e:
        raise BinaryFileError(path, e.signature) from None
    logger.debug("read %s: %d bytes as %s", path, len(data), result.encoding)
    return result


def write_text(
    path: StrPath,
    content: str,
    encoding: EncodingTag | str = EncodingTag.UTF8,
) -> int:
    """Encode *content* and write it to *path*, replacing any existing file.

    :returns: The number of bytes written.
    :raises OSError: If the file cannot be written.
    """
    data = encode(content, encoding)
    written = Path(path).write_bytes(data)
    logger.debug(
        "wrote %s: %d bytes as %s", path, written, EncodingTag.from_label(encoding)
    )
    return written


def is_binary_file(
    path: StrPath,
    sniff_bytes: int = BINARY_SNIFF_BYTES,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> bool:
    """Classify only the first *sniff_bytes* bytes of *path*.

    :raises OSError: If the file cannot be opened or read.
    """
    _validate_max_bytes(sniff_bytes, "sniff_bytes")
    # One extra byte tells is_binary whether the prefix was cut short.
    with Path(path).open("rb") as f:
        head = f.read(sniff_bytes + 1)
    return is_binary(head, max_bytes=sniff_bytes, thresholds=thresholds)


def unique_path(path: StrPath, now: datetime.datetime | None = None) -> Path:
    """Return *path* if it is free, else a timestamped sibling.

    The sibling is named ``<stem>_<YYYYmmddHHMM><suffix>``, so a file saved
    twice within the same minute reuses the second name.
    """
    p = Path(path)
    if not p.exists():
        return p
    if now is None:
        now = datetime.datetime.now()
    stem = p.stem or "file"
    return p.with_name(f"{stem}_{now:%Y%m%d%H%M}{p.suffix}")
