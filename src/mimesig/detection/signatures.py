# detection/signatures.py - Magic number signature table and matcher

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)


class Resolution(Enum):
    """
    Outcome of a signature match that names a format family but not the
    exact type. The subtype resolver turns each member into a MIME type.
    """
    MAYBE_ZIP = "maybe-zip"
    MAYBE_PNG = "maybe-png"
    OOXML = "ooxml"
    DOCFILE = "docfile"


@dataclass(frozen=True)
class Exact:
    """A run of bytes that must appear verbatim."""
    data: bytes

    def __len__(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class Gap:
    """A run of bytes whose values are not checked."""
    length: int

    def __len__(self) -> int:
        return self.length


Segment = Union[Exact, Gap]
Outcome = Union[str, Resolution]


@dataclass(frozen=True)
class SignatureEntry:
    name: str
    segments: Tuple[Segment, ...]
    outcome: Outcome


def match_segments(data: bytes, segments: Sequence[Segment], offset: int = 0) -> bool:
    """
    Check whether the segments match consecutively starting at offset

    Args:
        data: Buffer to test
        segments: Exact and Gap segments, applied in order
        offset: Position of the first segment in the buffer

    Returns:
        True if every segment fits inside the buffer and every Exact run matches
    """
    position = offset
    for segment in segments:
        end = position + len(segment)
        if end > len(data):
            return False
        if isinstance(segment, Exact) and data[position:end] != segment.data:
            return False
        position = end
    return True


def _sig(name: str, outcome: Outcome, *segments: Union[bytes, int]) -> SignatureEntry:
    # bytes become Exact runs, ints become Gaps
    parts = tuple(Gap(s) if isinstance(s, int) else Exact(s) for s in segments)
    return SignatureEntry(name, parts, outcome)


# Ordered by priority: the first matching entry wins, so more specific
# signatures must precede the generic ones they overlap with (OOXML before ZIP).
SIGNATURE_TABLE: Tuple[SignatureEntry, ...] = (
    # Documents
    _sig('pdf', 'application/pdf', b'%PDF'),
    _sig('email', 'message/rfc822', b'From: '),
    _sig('ooxml', Resolution.OOXML, b'PK\x03\x04\x14\x00\x06\x00'),
    _sig('docfile', Resolution.DOCFILE, b'\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1'),

    # Archives
    _sig('zip', Resolution.MAYBE_ZIP, b'PK\x03\x04'),
    _sig('zip-empty', Resolution.MAYBE_ZIP, b'PK\x05\x06'),
    _sig('zip-spanned', Resolution.MAYBE_ZIP, b'PK\x07\x08'),
    _sig('rar', 'application/vnd.rar', b'Rar!'),
    _sig('7z', 'application/x-7z-compressed', b'7z\xbc\xaf\x27\x1c'),

    # Images
    _sig('bmp', 'image/bmp', b'BM'),
    _sig('jpeg', 'image/jpeg', b'\xff\xd8\xff\xe0'),
    _sig('png', Resolution.MAYBE_PNG, b'\x89PNG\r\n\x1a\n'),
    _sig('webp', 'image/webp', b'RIFF', 4, b'WEBP'),
    _sig('gif87a', 'image/gif', b'GIF87a'),
    _sig('gif89a', 'image/gif', b'GIF89a'),

    # Video (Matroska shares the EBML magic and is reported as WebM)
    _sig('webm', 'video/webm', b'\x1a\x45\xdf\xa3'),
    _sig('mp4-msnv', 'video/mp4', b'ftypMSNV'),
    _sig('mp4-isom', 'video/mp4', b'ftypisom'),
    _sig('mp4-mp42', 'video/mp4', b'\x00\x00\x00\x20ftypmp42'),
    _sig('avi', 'video/avi', b'RIFF', 4, b'AVI '),
)


def match_signature(data: bytes) -> Optional[Outcome]:
    """
    Match the start of a buffer against the signature table

    Args:
        data: Buffer to identify; may be shorter than any signature

    Returns:
        A MIME type, a Resolution for ambiguous families, or None when
        no signature matches
    """
    for entry in SIGNATURE_TABLE:
        if match_segments(data, entry.segments):
            logger.debug(f"Matched signature '{entry.name}'")
            return entry.outcome
    return None
