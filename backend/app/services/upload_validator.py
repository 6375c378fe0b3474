"""
Video Upload Validation Service

Responsibilities:
- Validate declared MIME type against the supported video formats
- Validate upload size against the configured limit
"""

from typing import Optional

from app.core.errors import InvalidUpload


class UploadValidator:
    """
    Checks an uploaded video before anything is written or sent out.

    Pure check: no I/O, raises InvalidUpload on the first failing rule.
    """

    ALLOWED_MIME_TYPES = (
        "video/mp4",
        "video/webm",
        "video/quicktime",
        "video/x-msvideo",
    )
    MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB

    INVALID_TYPE_MESSAGE = "Invalid file type. Only MP4, WebM, MOV, and AVI are allowed."
    TOO_LARGE_MESSAGE = "Video file must be less than 10MB"

    def __init__(self, max_file_size: Optional[int] = None):
        self.max_file_size = max_file_size if max_file_size is not None else self.MAX_FILE_SIZE

    def validate(self, mime_type: Optional[str], size: int) -> None:
        """
        Args:
            mime_type: Declared content type of the upload
            size: Upload size in bytes

        Raises:
            InvalidUpload: If the type is not allowed or the file is too large
        """
        if mime_type not in self.ALLOWED_MIME_TYPES:
            raise InvalidUpload(self.INVALID_TYPE_MESSAGE)

        if size > self.max_file_size:
            raise InvalidUpload(self.TOO_LARGE_MESSAGE)
