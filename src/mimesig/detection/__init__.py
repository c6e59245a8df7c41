# detection/__init__.py - Signature matching, subtype resolution and extension lookup

from .signatures import Resolution, match_signature
from .identify import (
    identify_filename,
    identify_bytes,
    identify_bytes_with_name,
    filetype
)
