# File: authgate/core/logging_config.py

import logging

LOG_FORMAT = "[%(name)s] %(levelname)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Install a single stream handler on the root logger.

    Calling it again only adjusts the level, so repeated app creation
    (tests, reloads) does not duplicate output.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    root.setLevel(level)
