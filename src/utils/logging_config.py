"""
Logging Configuration

Root logger setup shared by the command-line scripts.
"""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with the project-wide format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
