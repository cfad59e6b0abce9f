"""
Shared Utilities

Common functions used across all modules.
"""

from src.utils.io import load_json, load_yaml, save_json
from src.utils.logging_config import setup_logging
from src.utils.temp_files import staged_directory, staged_file

__all__ = [
    "load_json",
    "save_json",
    "load_yaml",
    "setup_logging",
    "staged_file",
    "staged_directory",
]
