import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Handlers are attached by configure_logging at the CLI entry point.
    """
    return logging.getLogger(f"decoder_ring.{name}")
