"""Logging setup for the bank account package."""
import logging
from typing import Optional

from bank_account.config.settings import Settings

LOG_FORMAT = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Attach a single handler to the package logger.

    Writes to ``settings.log_file`` when set, otherwise to stderr. Calling
    it again replaces the handler instead of adding a second one.

    Args:
        settings: Settings to use, defaults to ``Settings()``

    Returns:
        The configured package logger
    """
    settings = settings or Settings()

    logger = logging.getLogger(settings.log_name)
    logger.setLevel(settings.log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    if settings.log_file:
        handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='a')
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    return logger
