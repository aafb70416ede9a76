"""
Profiles module exceptions.
"""

from shared.exceptions import ExternalServiceError


class PhotoStorageError(ExternalServiceError):
    """Raised when the photo bucket cannot issue an upload target."""

    def __init__(self, message: str, bucket: str):
        super().__init__(
            f"Photo storage error: {message}",
            service="storage",
            code="PHOTO_STORAGE_ERROR",
            details={"bucket": bucket},
        )
