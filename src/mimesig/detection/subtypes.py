# detection/subtypes.py - Resolve ambiguous signature matches to a concrete MIME type

import logging
from typing import Optional, Tuple

from .extensions import get_by_ext
from .signatures import Exact, Gap, Resolution, Segment, match_segments

logger = logging.getLogger(__name__)

MIME_DOC = 'application/msword'
MIME_XLS = 'application/vnd.ms-excel'
MIME_PPT = 'application/vnd.ms-powerpoint'
MIME_MSG = 'application/x-ms-msg'

MIME_DOCX = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'
MIME_XLSX = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
MIME_PPTX = 'application/vnd.openxmlformats-officedocument.presentationml.presentation'

# Compound file sub-header window
DOCFILE_SUBHEADER_OFFSET = 510
DOCFILE_SUBHEADER_LENGTH = 24

_SECTOR_MARK = b'\xfd\xff\xff\xff'

# Tried in order against the sub-header window; the first match wins.
# The FD FF FF FF family overlaps, so 07 (msg) must come before the ppt gap pattern.
DOCFILE_SUBHEADERS: Tuple[Tuple[Tuple[Segment, ...], str], ...] = (
    ((Exact(b'\xec\xa5\xc1\x00'),), MIME_DOC),
    ((Exact(_SECTOR_MARK + b'\x07'),), MIME_MSG),

    ((Exact(b'\x0f\x00\xe8\x03'),), MIME_PPT),
    ((Exact(b'\xa0\x46\x1d\xf0'),), MIME_PPT),
    ((Exact(_SECTOR_MARK), Gap(2), Exact(b'\x00\x00')), MIME_PPT),

    ((Exact(b'\x09\x08\x10\x00\x00\x06\x05\x00'),), MIME_XLS),
    ((Exact(_SECTOR_MARK), Gap(1), Exact(b'\x00')), MIME_XLS),
    ((Exact(_SECTOR_MARK), Gap(1), Exact(b'\x02')), MIME_XLS),
    ((Exact(_SECTOR_MARK + b'\x20\x00\x00\x00'),), MIME_XLS),

    ((Exact('Root Entry'.encode('utf-16-le')),), MIME_MSG),
    ((Exact(_SECTOR_MARK + b'\x04'),), MIME_MSG),
)

_ZIP_SUBTYPES = {
    '.jar': 'application/java-archive',
    '.odt': 'application/vnd.oasis.opendocument.text',
    '.odp': 'application/vnd.oasis.opendocument.presentation',
    # OpenXPS, reported as an OpenDocument presentation for compatibility
    '.oxps': 'application/vnd.oasis.opendocument.presentation',
}

_OOXML_SUBTYPES = {
    '.pptx': MIME_PPTX,
    '.xlsx': MIME_XLSX,
}


def identify_zip_subtype(ext: str) -> str:
    return _ZIP_SUBTYPES.get(ext, 'application/zip')


def identify_png_subtype(ext: str) -> str:
    # APNG has no magic of its own
    return 'image/apng' if ext == '.apng' else 'image/png'


def identify_ooxml_subtype(ext: str) -> str:
    return _OOXML_SUBTYPES.get(ext, MIME_DOCX)


def identify_docfile_subtype(data: bytes, ext: str) -> Optional[str]:
    """
    Identify a legacy compound file (doc/xls/ppt/msg) from its sub-header

    Args:
        data: Full buffer, starting with the compound file magic
        ext: Lowercased extension used when the sub-header is inconclusive

    Returns:
        MIME type, or None if neither the sub-header nor the extension is known
    """
    window = data[DOCFILE_SUBHEADER_OFFSET:DOCFILE_SUBHEADER_OFFSET + DOCFILE_SUBHEADER_LENGTH]
    for segments, mime_type in DOCFILE_SUBHEADERS:
        if match_segments(window, segments):
            return mime_type

    logger.debug(f"No compound file sub-header matched, falling back to extension '{ext}'")
    return get_by_ext(ext)


def resolve_subtype(tag: Resolution, data: bytes, ext: str) -> Optional[str]:
    """
    Narrow a Resolution to a concrete MIME type

    Args:
        tag: Format family reported by the signature matcher
        data: The buffer that produced the tag
        ext: Lowercased extension including the dot, or ''

    Returns:
        MIME type, or None when a compound file cannot be identified
    """
    if tag is Resolution.MAYBE_ZIP:
        return identify_zip_subtype(ext)
    elif tag is Resolution.MAYBE_PNG:
        return identify_png_subtype(ext)
    elif tag is Resolution.OOXML:
        return identify_ooxml_subtype(ext)
    elif tag is Resolution.DOCFILE:
        return identify_docfile_subtype(data, ext)

    raise ValueError(f"Unhandled resolution: {tag!r}")
