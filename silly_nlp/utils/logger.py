"""Structured logging configuration."""

import logging
import sys
from typing import Any, Optional

from silly_nlp.config import settings

# Configure logging format
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _resolve_level(level: Optional[int]) -> int:
    if level is not None:
        return level
    resolved = logging.getLevelName(settings.log_level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Setup a logger with consistent formatting.
    
    Args:
        name: Logger name (typically __name__)
        level: Logging level (defaults to settings.log_level)
        
    Returns:
        Configured logger instance
    """
    level = _resolve_level(level)
    logger = logging.getLogger(name)
    logger.setLevel(level)
    
    # Avoid duplicate handlers
    if logger.handlers:
        return logger
    
    # Console handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    
    # Formatter
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handler.setFormatter(formatter)
    
    logger.addHandler(handler)
    
    return logger


def log_stage_event(
    logger: logging.Logger,
    stage: str,
    event: str,
    level: int = logging.INFO,
    **kwargs: Any
) -> None:
    """
    Log a structured pipeline stage event.
    
    Args:
        logger: Logger instance
        stage: Pipeline stage name
        event: Event description
        level: Logging level for the record
        **kwargs: Additional context
    """
    context = " ".join(f"{k}={v}" for k, v in kwargs.items())
    logger.log(level, f"[STAGE:{stage}] {event} {context}".strip())
