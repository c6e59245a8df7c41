import pytest

from mimesig import (
    filetype,
    identify_bytes,
    identify_bytes_with_name,
    identify_filename,
)

OOXML = b"PK\x03\x04\x14\x00\x06\x00" + b"\x00" * 22
PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
DOCFILE_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"

MIME_XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def test_ooxml_resolved_by_filename():
    assert identify_bytes_with_name(OOXML, "report.xlsx") == MIME_XLSX


def test_ooxml_without_filename_defaults_to_word():
    assert identify_bytes(OOXML) == MIME_DOCX
    assert identify_bytes_with_name(OOXML) == MIME_DOCX


def test_ooxml_extension_is_case_insensitive():
    assert identify_bytes_with_name(OOXML, "C:/Reports/Q1.XLSX") == MIME_XLSX


def test_png_and_apng_share_signature():
    assert identify_bytes_with_name(PNG, "frame.png") == "image/png"
    assert identify_bytes_with_name(PNG, "anim.apng") == "image/apng"


def test_signature_beats_extension():
    assert identify_bytes_with_name(b"%PDF-1.4\n", "notes.txt") == "application/pdf"


def test_msword_literal_scenario():
    data = DOCFILE_MAGIC + b"\x00" * 502 + b"\xec\xa5\xc1\x00"
    assert identify_bytes(data) == "application/msword"


def test_mail_docfile_regardless_of_filename():
    data = DOCFILE_MAGIC + b"\xff" * 502 + "Root Entry".encode("utf-16-le") + b"\x00" * 4
    for name in ("", "message.msg", "message.doc", "message.xyz"):
        assert identify_bytes_with_name(data, name) == "application/x-ms-msg"


def test_docfile_without_subheader_or_name_is_unknown():
    assert identify_bytes(DOCFILE_MAGIC) is None


def test_no_signature_falls_back_to_extension():
    assert identify_bytes_with_name(b"plain text", "readme.txt") == "text/plain"


@pytest.mark.parametrize("filename", ["", "blob", "blob.unknownext"])
def test_unknown_is_none(filename):
    assert identify_bytes_with_name(b"\x00\x01\x02\x03", filename) is None


def test_identify_bytes_unknown():
    assert identify_bytes(b"") is None


def test_classification_is_repeatable():
    data = DOCFILE_MAGIC + b"\x00" * 502 + b"\x09\x08\x10\x00\x00\x06\x05\x00"
    first = identify_bytes_with_name(data, "sheet.xls")
    assert first == identify_bytes_with_name(data, "sheet.xls") == "application/vnd.ms-excel"


@pytest.mark.parametrize("name, expected", [
    ("report.PDF", "application/pdf"),
    ("/tmp/archive.tar.gz", "application/gzip"),
    (".png", "image/png"),
    (".PNG", "image/png"),
    ("movie.mkv", "video/webm"),
    ("README", None),
    ("", None),
    ("file.nosuchext", None),
])
def test_identify_filename(name, expected):
    assert identify_filename(name) == expected


def test_filetype_reads_file(tmp_path):
    path = tmp_path / "slides.pptx"
    path.write_bytes(OOXML)
    assert filetype(path) == "application/vnd.openxmlformats-officedocument.presentationml.presentation"
    assert filetype(str(path)) == filetype(path)


def test_filetype_jar(tmp_path):
    path = tmp_path / "app.jar"
    path.write_bytes(b"PK\x03\x04\x0a\x00\x00\x00")
    assert filetype(path) == "application/java-archive"


def test_filetype_falls_back_to_extension(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("<!doctype html>")
    assert filetype(path) == "text/html"


def test_filetype_empty_unknown_file(tmp_path):
    path = tmp_path / "empty"
    path.write_bytes(b"")
    assert filetype(path) is None


def test_filetype_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        filetype(tmp_path / "missing.pdf")


def test_filetype_directory_raises(tmp_path):
    with pytest.raises(OSError):
        filetype(tmp_path)


@pytest.mark.parametrize("name, expected", [
    ("firmware.bin", "application/octet-stream"),
    ("voice.opus", "audio/ogg"),
    ("page.xhtml", "application/xhtml+xml"),
    ("clip.3gp", "video/3gpp"),
    ("tune.mid", "audio/midi"),
    ("stream.ts", "video/mp2t"),
])
def test_no_signature_uses_common_extensions(name, expected):
    assert identify_bytes_with_name(b"\x00\x01\x02\x03", name) == expected
