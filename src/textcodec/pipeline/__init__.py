"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses

from textcodec.enums import EncodingTag


@dataclasses.dataclass(frozen=True, slots=True)
class DecodedText:
    """Text decoded from a byte buffer, with the tag needed to re-encode it.

    The tag travels with the text so that a later save reproduces the
    original framing, e.g. whether a byte-order mark was present.
    """

    text: str
    encoding: EncodingTag

    def to_dict(self) -> dict[str, str]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'content'`` and ``'encoding'`` keys, the
            encoding given as its label.
        """
        return {"content": self.text, "encoding": self.encoding.value}
