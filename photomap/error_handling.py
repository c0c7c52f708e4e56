"""
Basic error handling and logging infrastructure for the photo map.
"""

import logging
import sys
from typing import Optional
from pathlib import Path

from .config import config

# Configure logging
def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """
    Setup logging configuration for the photo map.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path
    """
    logger = logging.getLogger('photomap')
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

# Global logger instance
logger = setup_logging(config.log_level, config.log_file)

class PhotoMapError(Exception):
    """Base exception class for photo map errors."""
    pass

class ClusteringError(PhotoMapError, ValueError):
    """Exception raised when the clustering engine is called with an invalid radius."""
    pass

class PhotoSourceError(PhotoMapError):
    """Exception raised when a photo export cannot be read or parsed."""
    pass

def handle_error(error: Exception, context: str = "", raise_error: bool = True):
    """
    Handle and log errors consistently.

    Args:
        error: The exception that occurred
        context: Additional context about where the error occurred
        raise_error: Whether to re-raise the error after logging
    """
    error_msg = f"Error in {context}: {str(error)}" if context else f"Error: {str(error)}"
    logger.error(error_msg, exc_info=True)

    if raise_error:
        raise error

def safe_file_operation(operation_func, *args, **kwargs):
    """
    Wrapper for photo export file operations with error handling.

    Args:
        operation_func: Function to execute
        *args, **kwargs: Arguments for the function

    Returns:
        Result of the operation

    Raises:
        PhotoSourceError: If the file cannot be read
    """
    try:
        return operation_func(*args, **kwargs)
    except FileNotFoundError as e:
        raise PhotoSourceError(f"File not found: {e}") from e
    except PermissionError as e:
        raise PhotoSourceError(f"Permission denied: {e}") from e
    except OSError as e:
        raise PhotoSourceError(f"File system error: {e}") from e
