import logging

from ..settings import Settings

LOGGER_NAME = "blinkdebit"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Settings, handler: logging.Handler | None = None) -> logging.Logger:
    """
    Sets the SDK logger level from ``settings.LOG_LEVEL``.

    Handlers are left to the application unless one is passed in; the root
    logger is never touched.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL.upper())
    if handler is not None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
