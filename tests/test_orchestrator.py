from __future__ import annotations

from textcodec._utils import Thresholds
from textcodec.enums import EncodingTag
from textcodec.pipeline.orchestrator import detect_encoding


def test_empty_is_utf8():
    assert detect_encoding(b"") is EncodingTag.UTF8


def test_ascii_is_utf8():
    assert detect_encoding(b"Hello world") is EncodingTag.UTF8


def test_utf8_japanese_is_utf8():
    # Valid UTF-8 wins even though its bytes fall in Shift-JIS lead ranges.
    assert detect_encoding("日本語のテキスト".encode()) is EncodingTag.UTF8


def test_bom_detected():
    assert detect_encoding(b"\xef\xbb\xbfhi") is EncodingTag.UTF8_BOM


def test_bom_wins_over_invalid_payload():
    assert detect_encoding(b"\xef\xbb\xbf\x82\xa0\xff") is EncodingTag.UTF8_BOM


def test_shift_jis_single_character():
    assert detect_encoding(b"\x82\xa0") is EncodingTag.SHIFT_JIS


def test_shift_jis_sentence(sjis_bytes: bytes):
    assert detect_encoding(sjis_bytes) is EncodingTag.SHIFT_JIS


def test_latin1_falls_back_to_utf8():
    # 0xE9 is a lead byte but has no partner.
    assert detect_encoding(b"caf\xe9") is EncodingTag.UTF8


def test_low_shift_jis_score_falls_back_to_utf8():
    assert detect_encoding(b"hello world \x82\xa0") is EncodingTag.UTF8


def test_truncated_lead_byte_falls_back_to_utf8():
    assert detect_encoding(b"\x81") is EncodingTag.UTF8
    assert detect_encoding(b"A\x81") is EncodingTag.UTF8


def test_custom_thresholds():
    thresholds = Thresholds(shift_jis_ratio=0.1)
    assert detect_encoding(b"hello world \x82\xa0", thresholds) is EncodingTag.SHIFT_JIS
