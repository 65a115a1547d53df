import logging
import sys
from typing import Optional

from lipi.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(level: Optional[str] = None) -> bool:
    """Attach a stdout handler to the root logger once. Returns False if one was already there."""
    logger = logging.getLogger()
    if logger.handlers:
        return False
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    name = (level or settings.LOG_LEVEL).upper()
    logger.setLevel(getattr(logging, name, logging.INFO))
    logger.addHandler(handler)
    return True
