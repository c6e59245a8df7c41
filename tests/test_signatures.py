import pytest

from mimesig.detection.signatures import (
    Exact,
    Gap,
    Resolution,
    SIGNATURE_TABLE,
    match_segments,
    match_signature,
)


@pytest.mark.parametrize("data, expected", [
    (b"%PDF", "application/pdf"),
    (b"From: ", "message/rfc822"),
    (b"PK\x03\x04\x14\x00\x06\x00", Resolution.OOXML),
    (b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1", Resolution.DOCFILE),
    (b"PK\x03\x04", Resolution.MAYBE_ZIP),
    (b"PK\x05\x06", Resolution.MAYBE_ZIP),
    (b"PK\x07\x08", Resolution.MAYBE_ZIP),
    (b"Rar!", "application/vnd.rar"),
    (b"7z\xbc\xaf\x27\x1c", "application/x-7z-compressed"),
    (b"BM", "image/bmp"),
    (b"\xff\xd8\xff\xe0", "image/jpeg"),
    (b"\x89PNG\r\n\x1a\n", Resolution.MAYBE_PNG),
    (b"RIFF\x24\x00\x00\x00WEBP", "image/webp"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x1a\x45\xdf\xa3", "video/webm"),
    (b"ftypMSNV", "video/mp4"),
    (b"ftypisom", "video/mp4"),
    (b"\x00\x00\x00\x20ftypmp42", "video/mp4"),
    (b"RIFF\xff\xff\x00\x00AVI ", "video/avi"),
])
def test_minimal_signature(data, expected):
    assert match_signature(data) == expected


def test_ooxml_wins_over_generic_zip():
    data = b"PK\x03\x04\x14\x00\x06\x00" + b"\x00" * 64
    assert match_signature(data) is Resolution.OOXML


def test_zip_with_other_version_is_maybe_zip():
    assert match_signature(b"PK\x03\x04\x0a\x00\x00\x00") is Resolution.MAYBE_ZIP


@pytest.mark.parametrize("data", [
    b"",
    b"%PD",
    b"PK\x03",
    b"RIFF\x00\x00\x00\x00WEB",
    b"RIFF\x00\x00\x00\x00WAVE",
    b"hello world",
])
def test_no_match(data):
    assert match_signature(data) is None


def test_riff_gap_ignores_chunk_size():
    for size in (b"\x00\x00\x00\x00", b"\xff\xff\xff\xff", b"WEBP"):
        assert match_signature(b"RIFF" + size + b"WEBP") == "image/webp"


def test_accepts_bytearray_and_memoryview():
    assert match_signature(bytearray(b"%PDF-1.7")) == "application/pdf"
    assert match_signature(memoryview(b"GIF89a\x01\x00")) == "image/gif"


def test_match_segments_with_gap_and_offset():
    segments = (Exact(b"AB"), Gap(2), Exact(b"EF"))
    assert match_segments(b"ABxyEF", segments)
    assert match_segments(b"__ABxyEF", segments, offset=2)
    assert not match_segments(b"ABxyE", segments)
    assert not match_segments(b"ABxyEG", segments)


def test_gap_must_fit_inside_buffer():
    assert not match_segments(b"AB", (Exact(b"AB"), Gap(1)))


def test_table_order_is_specific_first():
    names = [entry.name for entry in SIGNATURE_TABLE]
    assert names.index("ooxml") < names.index("zip")
    assert names.index("webp") < names.index("avi")
