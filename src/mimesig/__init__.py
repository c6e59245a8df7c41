import os
import sys

from .detection import (
    Resolution,
    match_signature,
    identify_filename,
    identify_bytes,
    identify_bytes_with_name,
    filetype
)

__version__ = "0.1.0"


def main() -> None:
    """
    Entry point for the mimesig MCP server ('mimesig-mcp').

    An optional first argument overrides the root directory that
    identify_file paths are resolved against.
    """
    # Import here so the library API does not require the MCP SDK to be loaded
    from .config import Config
    from .server import MimeSigMCPServer
    from .utils.logging_utils import setup_logging

    # Configure logging from the environment first so config file messages are kept,
    # then again once the file's settings are known
    setup_logging(os.environ.get("MIMESIG_LOG_LEVEL", "INFO"), os.environ.get("MIMESIG_LOG_DIR"))

    config = Config(os.environ.get("MIMESIG_CONFIG"))
    if len(sys.argv) > 1:
        config.set('server.root_path', sys.argv[1])

    logger = setup_logging(config.get('server.log_level'), config.get('server.log_dir'))

    try:
        server = MimeSigMCPServer(config)
        server.start()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Error starting server: {str(e)}")
        sys.exit(1)


if __name__ == "__main__":
    main()
