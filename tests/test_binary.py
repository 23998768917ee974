import pytest

from textcodec._utils import Thresholds
from textcodec.pipeline.binary import is_binary, match_signature

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


def test_empty_input_is_not_binary():
    assert is_binary(b"") is False


def test_plain_ascii_is_not_binary():
    assert is_binary(b"Hello, world!") is False


def test_text_with_newlines_tabs_is_not_binary():
    assert is_binary(b"Hello\n\tworld\r\n") is False


def test_png_header_is_binary():
    assert is_binary(PNG_HEADER) is True


@pytest.mark.parametrize(
    ("data", "name"),
    [
        (PNG_HEADER + b"\x00\x00\x00\rIHDR", "png"),
        (b"\xff\xd8\xff\xe0\x00\x10JFIF", "jpeg"),
        (b"GIF89a\x01\x00\x01\x00", "gif"),
        (b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n", "pdf"),
        (b"PK\x03\x04\x14\x00\x06\x00", "zip"),
        (b"MZ\x90\x00\x03\x00\x00\x00", "pe"),
    ],
)
def test_magic_signatures_are_binary(data: bytes, name: str):
    assert match_signature(data) == name
    assert is_binary(data) is True


def test_signature_wins_over_valid_text():
    # Starts with "MZ" / "PK" but is otherwise ordinary UTF-8 text.
    assert is_binary(b"MZ is the first line of this note\n") is True
    assert is_binary("PKのメモ\n".encode()) is True


def test_no_signature_for_text():
    assert match_signature(b"Hello") is None
    assert match_signature(b"") is None
    assert match_signature(b"P") is None


def test_valid_utf8_with_control_bytes_is_text():
    # ASCII control bytes and NULs are still valid UTF-8.
    assert is_binary(b"\x00" * 100) is False
    assert is_binary(b"\x01\x02\x03\x04\x05\x06\x07\x08" * 20) is False


def test_utf8_text_is_not_binary():
    assert is_binary("Héllo wörld".encode()) is False


def test_shift_jis_text_is_not_binary(sjis_bytes: bytes):
    assert is_binary(sjis_bytes) is False


def test_nul_count_above_limit_is_binary():
    # 101 bytes: limit is 101 // 100 + 1 == 2 NULs.
    data = b"\xff" + b"\x00" * 3 + b"a" * 97
    assert is_binary(data) is True


def test_nul_count_at_limit_is_not_binary():
    data = b"\xff" + b"\x00" * 2 + b"a" * 98
    assert is_binary(data) is False


def test_control_ratio_above_threshold_is_binary():
    data = b"\xff" + b"\x01" * 40 + b"a" * 59
    assert is_binary(data) is True


def test_control_ratio_at_threshold_is_not_binary():
    data = b"\xff" + b"\x01" * 30 + b"a" * 69
    assert is_binary(data) is False


def test_tab_newline_carriage_return_are_not_control_bytes():
    data = b"\xff" + b"\t\n\r" * 33
    assert is_binary(data) is False


def test_custom_control_threshold():
    data = b"\xff" + b"\x01" * 40 + b"a" * 59
    assert is_binary(data, thresholds=Thresholds(control_ratio=0.5)) is False


def test_custom_nul_divisor():
    # 201 bytes: default limit is 3 NULs, a divisor of 10 allows 21.
    data = b"\xff" + b"\x00" * 10 + b"a" * 190
    assert is_binary(data) is True
    assert is_binary(data, thresholds=Thresholds(nul_divisor=10)) is False


def test_max_bytes_respected():
    # Binary content after max_bytes should be ignored
    text = b"\xff" + b"clean text " * 100
    binary_tail = b"\x00" * 1000
    assert is_binary(text + binary_tail) is True
    assert is_binary(text + binary_tail, max_bytes=len(text)) is False


def test_signature_verdict_is_prefix_stable():
    data = PNG_HEADER + b"trailing text" * 50
    for n in (4, 8, 64, len(data)):
        assert is_binary(data, max_bytes=n) is True


@pytest.mark.parametrize("max_bytes", [0, -1, True, 1.5])
def test_invalid_max_bytes(max_bytes):
    with pytest.raises(ValueError, match="max_bytes"):
        is_binary(b"abc", max_bytes=max_bytes)


def test_prefix_cut_inside_multibyte_character_is_text():
    # Each 52-byte unit holds a NUL and "あ"; 8192 bytes ends one byte into "あ".
    data = ("x" * 30 + ("a" * 48 + "\x00" + "あ") * 400).encode()
    assert is_binary(data) is False
    assert is_binary(data, max_bytes=8192) is False


def test_truncated_sequence_without_cut_is_not_valid_utf8():
    # Nothing was sliced off, so the dangling E3 81 makes the buffer invalid.
    data = b"\xe3\x81" + b"\x00" * 10
    assert is_binary(data) is True
    assert is_binary(data, max_bytes=len(data)) is True


def test_prefix_cut_does_not_hide_invalid_bytes():
    data = b"\xff" + b"\x00" * 50 + "あ".encode() * 10
    assert is_binary(data, max_bytes=52) is True
