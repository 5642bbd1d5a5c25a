import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance under the ``sv`` hierarchy.

    Handlers are attached by ``configure_logging`` at application entry.
    """
    return logging.getLogger(f"sv.{name}")
