import logging

from notesync.core.config import Settings, settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(config: Settings = settings) -> None:
    """Настройка корневого логгера пакета"""
    logger = logging.getLogger("notesync")
    logger.setLevel(config.log_level.upper())

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
