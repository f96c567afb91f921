"""Logging utilities for rapidshare modules."""

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits from the root logger.

    The logger propagates to the root logger, so ``logging.basicConfig()``
    is enough to see its output. When the root logger has no handlers yet,
    the level defaults to WARNING to keep library output quiet.

    Args:
        name: Logger name (typically ``rapidshare.<module>``)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.propagate = True

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logger.setLevel(logging.WARNING)

    return logger


def mask_cookie(cookie: str, visible: int = 6) -> str:
    """Shortens a session cookie for log output."""
    if not cookie:
        return ''
    if len(cookie) <= visible:
        return '*' * len(cookie)
    return f"{cookie[:visible]}..."
