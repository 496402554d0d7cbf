"""
Logging configuration shared by the server and scripts
"""

import logging

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(level: str = "info"):
    """Send jungle_king log records to stderr at the given level"""
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger("jungle_king").setLevel(numeric_level)
