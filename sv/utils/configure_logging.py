import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure unified SV logging.

    Args:
        level: Logging level name or number for the ``sv`` logger.
        log_file: Optional rotating log file. When omitted, records go to stderr.
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    root_logger = logging.getLogger("sv")
    root_logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    # urllib3 logs every connection attempt at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True
