import logging
import os
from typing import Optional


def get_logger(name: str = "fxagent", filepath: Optional[str] = None) -> logging.Logger:
    """Logger with one handler; level from FXAGENT_LOG_LEVEL, file from FXAGENT_LOG_FILE or stderr."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = os.getenv("FXAGENT_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    filepath = filepath or os.getenv("FXAGENT_LOG_FILE")
    if filepath:
        handler = logging.FileHandler(filepath)
    else:
        handler = logging.StreamHandler()

    formatter = logging.Formatter(
        "[%(asctime)s] [%(levelname)s] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
