import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(level: str = "WARN", log_file: Path | None = None) -> None:
    """Configure decoder-ring logging.

    Log records go to stderr; stdout carries transform output only.

    Args:
        level: One of DEBUG, INFO, WARN, ERROR
        log_file: Optional path of a rotating log file
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("decoder_ring")
    root_logger.setLevel(_LEVELS[level])

    # Format
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    _CONFIGURED = True
