"""Logging utilities for pathtree modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that automatically inherits from root logger.
    
    Loggers propagate to the root logger so that basicConfig() is enough
    to see pathtree output. Until the root logger has handlers, the
    logger defaults to WARNING.
    
    Args:
        name: Logger name (typically __name__)
        
    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True
    
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)
    
    return logger


def setup_logging(level=logging.INFO):
    """
    Configure logging for pathtree modules.
    
    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = ['pathtree'] + [
        name for name in logging.root.manager.loggerDict
        if name.startswith('pathtree.')
    ]
    
    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True
