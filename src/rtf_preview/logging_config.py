import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Send `rtf_preview.*` records to stdout at the given level name.

    Unknown level names fall back to INFO. Safe to call more than once.
    """
    logger = logging.getLogger("rtf_preview")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    # uvicorn configures the root logger too
    logger.propagate = False
    return logger
