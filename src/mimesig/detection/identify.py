# detection/identify.py - Identify MIME types from bytes, files and filenames

import logging
import os
from typing import Optional, Union

from ..utils.path_utils import get_extension
from .extensions import get_by_ext
from .signatures import Resolution, match_signature
from .subtypes import resolve_subtype

logger = logging.getLogger(__name__)


def identify_filename(filepath: Union[str, os.PathLike]) -> Optional[str]:
    """
    Convert a file path, filename or extension to a MIME type

    Args:
        filepath: e.g. 'reports/q1.XLSX', 'q1.xlsx' or '.xlsx'

    Returns:
        MIME type, or None if the extension is unknown
    """
    return get_by_ext(get_extension(filepath))


def identify_bytes(data: bytes) -> Optional[str]:
    """
    Identify a buffer from its signature alone.

    Ambiguous families resolve to their default type (application/zip,
    image/png, the OOXML word document), and compound files whose
    sub-header is not recognised are unknown.
    """
    return identify_bytes_with_name(data)


def identify_bytes_with_name(data: bytes, filename: Union[str, os.PathLike] = '') -> Optional[str]:
    """
    Identify a buffer from its signature, using the filename to resolve
    ambiguous signatures and as the fallback when nothing matches.

    Many formats are repackaged zip or compound files, so pass a filename
    whenever one is available.

    Args:
        data: Buffer to identify
        filename: Original file path or name; only its extension is used

    Returns:
        MIME type, or None if neither bytes nor extension identify it
    """
    ext = get_extension(filename)
    outcome = match_signature(data)

    if outcome is None:
        logger.debug(f"No signature matched, looking up extension '{ext}'")
        return get_by_ext(ext)

    if isinstance(outcome, Resolution):
        return resolve_subtype(outcome, data, ext)

    return outcome


def filetype(filepath: Union[str, os.PathLike]) -> Optional[str]:
    """
    Read a file from disk and identify it by signature, falling back to
    its extension

    Args:
        filepath: Path to the file

    Returns:
        MIME type, or None if the file could not be identified

    Raises:
        OSError: If the file cannot be read
    """
    with open(filepath, 'rb') as f:
        data = f.read()

    return identify_bytes_with_name(data, filepath)
