# File: blog_api/core/logging_config.py

import logging

from blog_api.core.config import Settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(settings: Settings) -> None:
    """
    Configure the root logger once at startup.

    Modules log through ``logging.getLogger(__name__)``; uvicorn's own
    loggers are left alone.
    """
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, level=level)
    else:
        root.setLevel(level)
