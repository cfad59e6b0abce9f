"""
Temporary File Utilities

Scoped staging of image bytes for tools that need a real file on disk.
Files and directories are removed when the ``with`` block exits, whether it
returns normally or raises.
"""

import logging
import shutil
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from src.common.exceptions import TempFileError

logger = logging.getLogger(__name__)


@contextmanager
def staged_file(
    data: bytes, file_name: str = "image", directory: Optional[Path] = None
) -> Iterator[Path]:
    """
    Write ``data`` to a temporary file and yield its path.

    Args:
        data: Bytes to stage.
        file_name: Suffix for the generated name, e.g. ``"page.png"``.
        directory: Parent directory (system temp dir if None).

    Yields:
        Path of the staged file.

    Raises:
        TempFileError: If the file cannot be created or written.

    Example:
        >>> with staged_file(b"...", "page.png") as path:
        ...     text = run_tesseract(path)
    """
    try:
        fd, name = tempfile.mkstemp(prefix="temp", suffix=f"_{file_name}", dir=directory)
    except OSError as e:
        raise TempFileError(f"Cannot create temporary file for {file_name}: {e}") from e

    path = Path(name)
    try:
        try:
            with open(fd, "wb") as f:
                f.write(data)
        except OSError as e:
            raise TempFileError(f"Cannot write temporary file {path}: {e}") from e

        logger.debug(f"Staged {len(data)} bytes at {path}")
        yield path
    finally:
        path.unlink(missing_ok=True)
        logger.debug(f"Removed staged file {path}")


@contextmanager
def staged_directory(prefix: str = "tempFolder_") -> Iterator[Path]:
    """
    Create a temporary directory and remove it with its contents on exit.

    Raises:
        TempFileError: If the directory cannot be created.
    """
    try:
        path = Path(tempfile.mkdtemp(prefix=prefix))
    except OSError as e:
        raise TempFileError(f"Cannot create temporary directory: {e}") from e

    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)
        logger.debug(f"Removed staged directory {path}")
