import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_DIR = Path(os.environ.get("NETMETRICS_LOG_DIR", "netmetrics_logs"))
LOG_FILE = LOG_DIR / "netmetrics.log"


def init_logger(level=logging.INFO, log_file: Path = LOG_FILE):
    logger = logging.getLogger("netmetrics")
    logger.setLevel(level)

    if logger.handlers:
        return logger

    # Console handler
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    ))
    logger.addHandler(ch)

    # Rotating File Handler
    log_file.parent.mkdir(parents=True, exist_ok=True)
    fh = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s (%(filename)s:%(lineno)d)"
    ))
    logger.addHandler(fh)

    return logger


LOGGER = init_logger()


def dbg(msg: str):
    LOGGER.debug(msg)


def info(msg: str):
    LOGGER.info(msg)


def warn(msg: str):
    LOGGER.warning(msg)


def err(msg: str):
    LOGGER.error(msg)
