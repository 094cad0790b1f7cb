"""Logging configuration."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_configured = False


def setup_logging(level: LogLevel = "INFO", format_style: Literal["simple", "detailed"] = "simple") -> None:
    """Configure logging for the application.
    
    Only the first call takes effect.
    
    Args:
        level: Log level
        format_style: 'simple' for the CLI, 'detailed' for the server
    """
    global _configured
    
    if _configured:
        return
    
    if format_style == "simple":
        fmt = "%(levelname)s | %(name)s | %(message)s"
    else:
        fmt = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
    
    logging.basicConfig(
        level=getattr(logging, level),
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
    
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Configured logger
    """
    return logging.getLogger(name)
