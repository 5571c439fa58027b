# app/core/logging_config.py
import logging

from app.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

_configured = False


def setup_logging(level: str = LOG_LEVEL) -> None:
    """
    Configure the root logger once. Modules log through logging.getLogger(__name__).
    """
    global _configured
    if _configured:
        return
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # uvicorn access lines duplicate the request middleware output
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    _configured = True
