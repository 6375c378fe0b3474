"""
General utility functions.

Responsibilities:
- Scoped temp-file handling for uploaded videos
- File extension helpers for upload MIME types
"""

import os
import tempfile
from contextlib import contextmanager
from typing import Iterator, Optional

from app.core.logger import get_logger

logger = get_logger(__name__)

MIME_EXTENSIONS = {
    "video/mp4": ".mp4",
    "video/webm": ".webm",
    "video/quicktime": ".mov",
    "video/x-msvideo": ".avi",
}


def extension_for(mime_type: Optional[str]) -> str:
    """Returns a file suffix for a video MIME type ("" when unknown)."""
    return MIME_EXTENSIONS.get(mime_type or "", "")


@contextmanager
def scoped_temp_file(
    data: bytes,
    suffix: str = "",
    directory: Optional[str] = None
) -> Iterator[str]:
    """
    Saves data to a temporary file and yields its path.

    The file is deleted when the block exits, whether it returns normally
    or raises. A failed delete is logged and never propagated.

    Args:
        data: Bytes to write
        suffix: Filename suffix (e.g. ".mp4")
        directory: Target directory, system temp dir when None

    Yields:
        Absolute path of the temporary file
    """
    if directory:
        os.makedirs(directory, exist_ok=True)

    fd, path = tempfile.mkstemp(suffix=suffix, prefix="upload-", dir=directory)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        logger.debug(f"Wrote {len(data)} bytes to {path}")
        yield path
    finally:
        try:
            os.remove(path)
            logger.debug(f"Removed temp file {path}")
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"Failed to remove temp file {path}: {e}")
