"""
Logging utilities for the application.
"""
import logging


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure logging for the application.

    Returns:
        Logger instance
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    logger = logging.getLogger("auction_api")
    return logger
