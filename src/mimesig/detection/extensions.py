# detection/extensions.py - Static extension to MIME type table

from types import MappingProxyType
from typing import Mapping, Optional

# Keys are lowercased and include the leading dot
_EXTENSIONS = {
    # Documents
    '.pdf': 'application/pdf',
    '.eml': 'message/rfc822',
    '.msg': 'application/x-ms-msg',
    '.doc': 'application/msword',
    '.dot': 'application/msword',
    '.xls': 'application/vnd.ms-excel',
    '.xlt': 'application/vnd.ms-excel',
    '.ppt': 'application/vnd.ms-powerpoint',
    '.pps': 'application/vnd.ms-powerpoint',
    '.docx': 'application/vnd.openxmlformats-officedocument.wordprocessingml.document',
    '.xlsx': 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet',
    '.pptx': 'application/vnd.openxmlformats-officedocument.presentationml.presentation',
    '.odt': 'application/vnd.oasis.opendocument.text',
    '.ods': 'application/vnd.oasis.opendocument.spreadsheet',
    '.odp': 'application/vnd.oasis.opendocument.presentation',
    '.oxps': 'application/oxps',
    '.rtf': 'application/rtf',
    '.epub': 'application/epub+zip',
    '.txt': 'text/plain',
    '.csv': 'text/csv',
    '.md': 'text/markdown',
    '.abw': 'application/x-abiword',
    '.azw': 'application/vnd.amazon.ebook',
    '.odg': 'application/vnd.oasis.opendocument.graphics',
    '.vsd': 'application/vnd.visio',
    '.bin': 'application/octet-stream',

    # Web
    '.html': 'text/html',
    '.htm': 'text/html',
    '.css': 'text/css',
    '.js': 'text/javascript',
    '.mjs': 'text/javascript',
    '.json': 'application/json',
    '.xml': 'application/xml',
    '.xhtml': 'application/xhtml+xml',
    '.jsonld': 'application/ld+json',
    '.php': 'application/x-httpd-php',
    '.sh': 'application/x-sh',
    '.ics': 'text/calendar',
    '.wasm': 'application/wasm',

    # Archives
    '.zip': 'application/zip',
    '.jar': 'application/java-archive',
    '.rar': 'application/vnd.rar',
    '.7z': 'application/x-7z-compressed',
    '.gz': 'application/gzip',
    '.tar': 'application/x-tar',
    '.bz2': 'application/x-bzip2',
    '.bz': 'application/x-bzip',
    '.arc': 'application/x-freearc',
    '.mpkg': 'application/vnd.apple.installer+xml',

    # Images
    '.bmp': 'image/bmp',
    '.jpg': 'image/jpeg',
    '.jpeg': 'image/jpeg',
    '.png': 'image/png',
    '.apng': 'image/apng',
    '.gif': 'image/gif',
    '.webp': 'image/webp',
    '.svg': 'image/svg+xml',
    '.ico': 'image/vnd.microsoft.icon',
    '.tif': 'image/tiff',
    '.tiff': 'image/tiff',
    '.avif': 'image/avif',

    # Audio
    '.mp3': 'audio/mpeg',
    '.wav': 'audio/wav',
    '.ogg': 'audio/ogg',
    '.oga': 'audio/ogg',
    '.flac': 'audio/flac',
    '.aac': 'audio/aac',
    '.weba': 'audio/webm',
    '.opus': 'audio/ogg',
    '.mid': 'audio/midi',
    '.midi': 'audio/midi',
    '.cda': 'application/x-cdf',

    # Video
    '.3gp': 'video/3gpp',
    '.3g2': 'video/3gpp2',
    '.webm': 'video/webm',
    '.mkv': 'video/webm',
    '.mp4': 'video/mp4',
    '.m4v': 'video/mp4',
    '.avi': 'video/avi',
    '.mov': 'video/quicktime',
    '.mpeg': 'video/mpeg',
    '.ogv': 'video/ogg',
    '.ts': 'video/mp2t',
    '.ogx': 'application/ogg',

    # Fonts
    '.ttf': 'font/ttf',
    '.otf': 'font/otf',
    '.woff': 'font/woff',
    '.woff2': 'font/woff2',
    '.eot': 'application/vnd.ms-fontobject',
}

EXTENSION_TABLE: Mapping[str, str] = MappingProxyType(_EXTENSIONS)


def get_by_ext(ext: str) -> Optional[str]:
    """
    Look up the MIME type registered for an extension

    Args:
        ext: Lowercased extension including the leading dot, or ''

    Returns:
        The MIME type, or None if the extension is empty or unknown
    """
    return EXTENSION_TABLE.get(ext)
