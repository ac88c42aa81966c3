import logging

from splitledger.core.config import settings

LOGGER_NAME = "splitledger"
LOG_FORMAT = "%(asctime)s %(levelname)s Splitledger : %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the package logger once. Modules log through
    logging.getLogger(__name__), which lands under this namespace.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel((level or settings.LOG_LEVEL).upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
