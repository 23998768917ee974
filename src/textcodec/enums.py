"""Enumerations for textcodec."""

from __future__ import annotations

import enum

from textcodec.errors import UnknownEncodingError


class EncodingTag(enum.Enum):
    """The closed set of encodings a decoded text can carry.

    Member values are the labels used by hosts to name an encoding.
    """

    UTF8 = "UTF-8"
    UTF8_BOM = "UTF-8-BOM"
    SHIFT_JIS = "SHIFT-JIS"

    def __str__(self) -> str:
        return self.value

    @property
    def short_label(self) -> str:
        """Compact label suitable for a status bar."""
        if self is EncodingTag.SHIFT_JIS:
            return "S-JIS"
        return self.value

    @classmethod
    def from_label(cls, label: EncodingTag | str) -> EncodingTag:
        """Resolve *label* (a tag or a case-insensitive name) to a tag.

        :raises UnknownEncodingError: If *label* names no supported encoding.
        """
        if isinstance(label, cls):
            return label
        key = str(label).strip().lower().replace("_", "-").replace(" ", "-")
        try:
            return _ALIASES[key]
        except KeyError:
            msg = f"unsupported encoding: {label!r}"
            raise UnknownEncodingError(msg) from None


_ALIASES: dict[str, EncodingTag] = {
    "utf-8": EncodingTag.UTF8,
    "utf8": EncodingTag.UTF8,
    "utf-8-bom": EncodingTag.UTF8_BOM,
    "utf8-bom": EncodingTag.UTF8_BOM,
    "utf-8-sig": EncodingTag.UTF8_BOM,
    "shift-jis": EncodingTag.SHIFT_JIS,
    "shiftjis": EncodingTag.SHIFT_JIS,
    "sjis": EncodingTag.SHIFT_JIS,
    "s-jis": EncodingTag.SHIFT_JIS,
    "cp932": EncodingTag.SHIFT_JIS,
    "windows-31j": EncodingTag.SHIFT_JIS,
}
