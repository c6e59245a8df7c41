# utils/logging_utils.py - Logging utilities for mimesig

import logging
import os
import sys
from typing import Optional

def setup_logging(log_level: str = "INFO", log_dir: Optional[str] = None) -> logging.Logger:
    """
    Set up logging with the specified log level
    
    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the log file (defaults to ./logs)
        
    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    
    # stdout may carry the MCP stdio transport, so console output goes to stderr
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    
    logger = logging.getLogger('mimesig')
    logger.setLevel(numeric_level)
    
    if log_dir is None:
        log_dir = os.path.join(os.getcwd(), 'logs')
    if not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError:
            pass  # Ignore if can't create log directory
    
    log_file = os.path.abspath(os.path.join(log_dir, 'mimesig.log'))
    already_attached = False
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.FileHandler):
            continue
        if handler.baseFilename == log_file:
            handler.setLevel(numeric_level)
            already_attached = True
        else:
            # Called again with a new log_dir: move the file handler
            logger.removeHandler(handler)
            handler.close()
    if os.path.isdir(log_dir) and not already_attached:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    
    return logger
