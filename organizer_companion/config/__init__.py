from organizer_companion.config.settings import Config
from organizer_companion.config.logging_config import setup_logging

__all__ = ["Config", "setup_logging"]
