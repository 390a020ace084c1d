import logging

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] [%(filename)s:%(lineno)d - %(funcName)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("logos")


def get_logger():
    return logger


def set_level(level: str) -> None:
    """Apply a level name such as "debug" or "WARNING"; unknown names are ignored."""
    resolved = logging.getLevelName(level.strip().upper()) if level else None
    if isinstance(resolved, int):
        logger.setLevel(resolved)
