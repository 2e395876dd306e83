import logging
import sys

logger = logging.getLogger("movie_relay")

if not logger.hasHandlers():  # avoid duplicate handlers on reload
    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)

logger.setLevel(logging.INFO)
logger.propagate = False


def configure_logging(level: str) -> None:
    logger.setLevel(level.upper())
