import logging
from typing import Optional

from .config import GameConfig

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DEFAULT_LOG_LEVEL = "WARNING"


def setup_logging(level: Optional[str] = None) -> None:
    log_level = (level or GameConfig.LOG_LEVEL).upper()
    unknown_level = log_level not in LOG_LEVELS
    if unknown_level:
        requested, log_level = log_level, DEFAULT_LOG_LEVEL

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(GameConfig.LOG_FORMAT))
    root.addHandler(stream_handler)

    if unknown_level:
        logging.getLogger(__name__).warning(
            "Unknown log level %r, using %s", requested, DEFAULT_LOG_LEVEL
        )
