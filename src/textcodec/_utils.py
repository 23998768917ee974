"""Internal shared utilities and tunable thresholds for textcodec."""

from __future__ import annotations

import dataclasses

#: Minimum ``score / len`` for a buffer to be detected as Shift-JIS.
SHIFT_JIS_THRESHOLD: float = 0.4

#: Maximum fraction of control bytes tolerated in non-UTF-8 text.
CONTROL_RATIO_THRESHOLD: float = 0.30

#: NUL bytes beyond ``len // NUL_DIVISOR + 1`` mark a buffer as binary.
NUL_DIVISOR: int = 100

#: Prefix length examined by the quick on-disk binary check.
BINARY_SNIFF_BYTES: int = 8192


@dataclasses.dataclass(frozen=True, slots=True)
class Thresholds:
    """Heuristic thresholds shared by the classifier and the detector.

    The defaults are empirical.  Changing them changes which buffers are
    reported as binary or as Shift-JIS, so they are exposed here rather
    than buried in the scanning code.
    """

    shift_jis_ratio: float = SHIFT_JIS_THRESHOLD
    control_ratio: float = CONTROL_RATIO_THRESHOLD
    nul_divisor: int = NUL_DIVISOR

    def __post_init__(self) -> None:
        for name in ("shift_jis_ratio", "control_ratio"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                msg = f"{name} must be between 0 and 1, got {value!r}"
                raise ValueError(msg)
        if (
            isinstance(self.nul_divisor, bool)
            or not isinstance(self.nul_divisor, int)
            or self.nul_divisor < 1
        ):
            msg = "nul_divisor must be a positive integer"
            raise ValueError(msg)

    def nul_limit(self, length: int) -> int:
        """Return the largest NUL count still tolerated in *length* bytes."""
        return length // self.nul_divisor + 1


DEFAULT_THRESHOLDS = Thresholds()


def _validate_max_bytes(max_bytes: int, name: str = "max_bytes") -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = f"{name} must be a positive integer"
        raise ValueError(msg)


def _as_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Return *data* as an immutable ``bytes`` object."""
    return data if isinstance(data, bytes) else bytes(data)
