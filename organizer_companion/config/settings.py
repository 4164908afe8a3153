"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
    LOG_FILE = os.getenv("LOG_FILE", "") or None

    # Timestamps
    # Stamps created/modified dates in UTC when on, local time otherwise
    USE_UTC_CLOCK = os.getenv("USE_UTC_CLOCK", "true").lower() in {
        "1",
        "true",
        "yes",
        "on",
    }

    # JSON projection
    JSON_INDENT = int(os.getenv("JSON_INDENT", "0")) or None
