# utils/path_utils.py - Path and extension helpers

import os
import re
from typing import Union


def get_extension(path: Union[str, os.PathLike]) -> str:
    """
    Get the lowercased extension of a path or filename

    A bare extension such as '.PNG' is returned as '.png', so a dotfile
    like '.bashrc' yields '.bashrc'. Names without a dot return ''.
    
    Args:
        path: File path, filename or dotted extension
        
    Returns:
        Lowercased extension including the leading dot, or ''
    """
    name = os.path.basename(os.fspath(path))
    _, ext = os.path.splitext(name)
    if not ext and name.startswith('.') and name.count('.') == 1 and len(name) > 1:
        # A lone '.ext' is treated as an extension rather than a dotfile
        ext = name
    return ext.lower()


def normalize_path(path: str) -> str:
    """
    Normalize a path by converting backslashes to forward slashes
    and removing redundant separators
    
    Args:
        path: The path to normalize
        
    Returns:
        Normalized path string
    """
    normalized = path.replace('\\', '/')
    normalized = re.sub(r'/+', '/', normalized)
    
    if normalized != '/' and normalized.endswith('/'):
        normalized = normalized[:-1]
        
    return normalized


def get_absolute_path(base_path: str, relative_path: str) -> str:
    """
    Convert a relative path to an absolute path within the base directory
    
    Args:
        base_path: The base directory
        relative_path: The path relative to the base directory
        
    Returns:
        Absolute path
    """
    if relative_path == '/' or relative_path == '':
        return base_path
    
    if relative_path.startswith('/'):
        relative_path = relative_path[1:]
    
    return os.path.normpath(os.path.join(base_path, relative_path))


def is_path_within(path: str, base_path: str) -> bool:
    """
    Check if a path stays inside the base directory once symlinks are
    resolved. The path does not have to exist.
    
    Args:
        path: The path to check
        base_path: The base directory
        
    Returns:
        True if the path is the base directory or below it
    """
    norm_path = os.path.realpath(path)
    norm_base = os.path.realpath(base_path)
    return os.path.commonpath([norm_path, norm_base]) == norm_base
