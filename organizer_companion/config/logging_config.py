import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path
from organizer_companion.config.settings import Config


class SafeFormatter(logging.Formatter):
    """Formatter that ensures entity_type always exists."""

    def format(self, record):
        if not hasattr(record, "entity_type"):
            record.entity_type = "-"
        return super().format(record)


def setup_logging(level: str | None = None, log_file: str | None = None):
    level = level or Config.LOG_LEVEL
    log_file = log_file or Config.LOG_FILE

    root = logging.getLogger()
    root.setLevel(logging.WARNING)  # Set root to WARNING to avoid too much noise
    formatter = SafeFormatter(Config.LOG_FORMAT)

    logger_handler = logging.StreamHandler(sys.stdout)
    logger_handler.setFormatter(formatter)
    root.addHandler(logger_handler)

    # Set up file logging if log_file provided with rotation
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    logging.getLogger("organizer_companion").setLevel(
        getattr(logging, level.upper(), logging.INFO)
    )
    logging.getLogger("organizer_companion").info("Logging is set up.")

    return root
