# server.py - MCP server exposing MIME type identification tools
import base64
import binascii
import logging
import os
from typing import Any, Dict, Optional

from mcp.server.fastmcp import FastMCP

from .config import Config
from .detection import identify
from .utils.path_utils import (
    get_extension,
    normalize_path,
    get_absolute_path,
    is_path_within
)

logger = logging.getLogger(__name__)


def _result(mime_type: Optional[str], **extra: Any) -> Dict[str, Any]:
    data = {"mime_type": mime_type, "identified": mime_type is not None}
    data.update(extra)
    return {"success": True, "data": data}


class MimeSigMCPServer:
    """
    MCP Server for MIME type identification

    Exposes signature- and extension-based identification of filenames,
    raw bytes and files below a root directory through the Model Context
    Protocol.
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the MCP server

        Args:
            config: Server configuration (defaults to environment-derived settings)
        """
        self.config = config or Config()
        self.root_path = os.path.abspath(self.config.get('server.root_path', '.'))
        self.max_file_size = self.config.get('tools.max_file_size')

        self.mcp = FastMCP(
            self.config.get('server.name'),
            instructions="Identify MIME types of files and byte buffers from magic numbers and extensions"
        )

        self._register_tools()
        logger.info(f"mimesig MCP server initialized with root: {self.root_path}")

    def _validate_path(self, path: str) -> str:
        """
        Resolve a path relative to the server root

        Args:
            path: Path relative to the root

        Returns:
            Absolute path

        Raises:
            ValueError: If the path escapes the root
        """
        abs_path = get_absolute_path(self.root_path, normalize_path(path))

        if not is_path_within(abs_path, self.root_path):
            logger.warning(f"Invalid path requested: {path}")
            raise ValueError(f"Path is outside the server root: {path}")

        return abs_path

    def identify_filename(self, filename: str) -> Dict[str, Any]:
        """
        Identify the MIME type of a file from its name or extension

        Args:
            filename: File path, filename or extension such as '.pdf'

        Returns:
            Dictionary with the MIME type, or None when the extension is unknown
        """
        try:
            mime_type = identify.identify_filename(filename)
            return _result(mime_type, filename=filename, extension=get_extension(filename))
        except Exception as e:
            logger.error(f"Error identifying filename {filename}: {str(e)}")
            return {
                "success": False,
                "error": f"Failed to identify filename: {str(e)}",
                "filename": filename
            }

    def identify_bytes(self, data_base64: str, filename: str = "") -> Dict[str, Any]:
        """
        Identify the MIME type of base64-encoded content

        Args:
            data_base64: File content, base64 encoded
            filename: Optional original filename used to resolve ambiguous formats

        Returns:
            Dictionary with the MIME type and decoded size
        """
        try:
            # Clients may send MIME-style line-wrapped base64
            data = base64.b64decode("".join(data_base64.split()), validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error(f"Invalid base64 payload for {filename or '<unnamed>'}: {str(e)}")
            return {
                "success": False,
                "error": "Invalid base64 data",
                "filename": filename
            }

        try:
            mime_type = identify.identify_bytes_with_name(data, filename)
            return _result(mime_type, filename=filename, size=len(data))
        except Exception as e:
            logger.error(f"Error identifying bytes for {filename or '<unnamed>'}: {str(e)}")
            return {
                "success": False,
                "error": f"Failed to identify bytes: {str(e)}",
                "filename": filename
            }

    def identify_file(self, path: str) -> Dict[str, Any]:
        """
        Identify the MIME type of a file below the server root

        Args:
            path: Path relative to the server root

        Returns:
            Dictionary with the MIME type and file size
        """
        try:
            abs_path = self._validate_path(path)
            size = os.path.getsize(abs_path)
            if self.max_file_size is not None and size > self.max_file_size:
                return {
                    "success": False,
                    "error": f"File exceeds maximum size of {self.max_file_size} bytes",
                    "path": path,
                    "size": size
                }

            mime_type = identify.filetype(abs_path)
            return _result(mime_type, path=path, size=size)
        except Exception as e:
            logger.error(f"Error identifying file {path}: {str(e)}")
            return {
                "success": False,
                "error": f"Failed to identify file: {str(e)}",
                "path": path
            }

    def _register_tools(self):
        """Register the identification tools with the MCP server"""
        self.mcp.tool()(self.identify_filename)
        self.mcp.tool()(self.identify_bytes)
        self.mcp.tool()(self.identify_file)

        logger.info("Identification tools registered with MCP server")

    def start(self):
        """Start the MCP server"""
        logger.info("Starting mimesig MCP server")
        try:
            self.mcp.run()
        except Exception as e:
            logger.error(f"Error running MCP server: {str(e)}")
            raise
