import sys
from typing import Optional

from loguru import logger

from secret_santa.core.config import Settings, load_settings

LOG_FORMAT = "{time} | {level} | {module}:{function}:{line} | {message}"


def setup_logging(level: str, log_path: Optional[str] = None) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if not log_path:
        return
    # full draw trace goes to the file whatever the console level
    logger.add(
        log_path,
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="100 KB",
        compression="zip",
    )


def configure_logging(settings: Optional[Settings] = None) -> Settings:
    """Apply ``SANTA_LOG_LEVEL`` / ``SANTA_LOG_PATH`` to the loguru sinks.

    Hosting applications call this once at startup; the draw functions never
    touch sink configuration themselves.
    """
    if settings is None:
        settings = load_settings()
    setup_logging(settings.log_level, settings.log_path)
    logger.bind(level=settings.log_level, log_path=settings.log_path).debug("Logging configured")
    return settings
