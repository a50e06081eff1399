import logging

from app.utils.config import Settings


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(config: Settings) -> None:
    """Configure root logging once at startup from settings.log_level."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # pymongo's heartbeat chatter drowns out request logs at DEBUG
    logging.getLogger("pymongo").setLevel(max(level, logging.INFO))
