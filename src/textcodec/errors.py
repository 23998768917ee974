"""Exceptions raised by textcodec.

I/O failures are not wrapped: :class:`OSError` reaches the caller as-is.
"""

from __future__ import annotations

from os import PathLike


class TextCodecError(Exception):
    """Base class for textcodec errors."""


class BinaryFileError(TextCodecError):
    """Raised when binary content is offered where text is required."""

    def __init__(
        self,
        path: str | PathLike[str] | None = None,
        signature: str | None = None,
    ) -> None:
        self.path = path
        self.signature = signature
        where = f"{path}: " if path is not None else ""
        what = f" ({signature})" if signature else ""
        super().__init__(f"{where}binary content cannot be read as text{what}")


class DecodeError(TextCodecError):
    """Raised when a strict decode fails."""


class InvalidUtf8BomError(DecodeError, UnicodeError):
    """Raised when BOM-tagged content is not valid UTF-8 after the BOM.

    :attr:`start` is the offset of the first bad byte, counted from the end
    of the byte-order mark.
    """

    def __init__(self, start: int, reason: str) -> None:
        self.start = start
        self.reason = reason
        super().__init__(
            f"invalid UTF-8 after byte-order mark at offset {start}: {reason}"
        )


class UnknownEncodingError(TextCodecError, ValueError):
    """Raised when an encoding label names no supported encoding."""
