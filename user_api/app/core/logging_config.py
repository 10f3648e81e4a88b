"""
Logging configuration for the User API.

``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the ``user_api`` logger, so service and
persistence messages are emitted regardless of how the host process
configured the root logger.  The same level is applied to uvicorn's
server logger; its per‑request access log stays at WARNING unless
``DEBUG`` is on.
"""

import logging
from pathlib import Path

from .config import Settings, settings


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_HANDLER = "user_api.console"


def resolve_level(config: Settings) -> int:
    if config.debug:
        return logging.DEBUG
    return getattr(logging, config.log_level.upper(), logging.INFO)


def setup_logging(config: Settings = settings) -> logging.Logger:
    """Configure the ``user_api`` logger from ``config``.

    Handlers are named, so calling this again (``create_app`` runs once
    per test app) only updates levels and adds a file handler for a log
    file that is not attached yet.

    Returns
    -------
    logging.Logger
        The ``user_api`` package logger.
    """
    level = resolve_level(config)
    logger = logging.getLogger("user_api")
    logger.setLevel(level)

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(logging.DEBUG if config.debug else logging.WARNING)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    attached = {handler.get_name() for handler in logger.handlers}

    if CONSOLE_HANDLER not in attached:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if config.log_file:
        log_path = Path(config.log_file).resolve()
        file_handler_name = f"user_api.file:{log_path}"
        if file_handler_name not in attached:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(file_handler_name)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    return logger
