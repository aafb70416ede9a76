"""
Profile photo storage on a Supabase Storage bucket.

Clients upload directly to a signed URL, then save the returned path on
their profile. Reads go through short-lived signed download URLs.
"""

import logging
import uuid
from typing import Any, Optional

from supabase import Client

from .exceptions import PhotoStorageError
from .models import UploadTarget

logger = logging.getLogger(__name__)


class PhotoStorage:
    """Signed upload/download URLs for one bucket."""

    def __init__(self, db: Client, bucket: str, url_ttl: int = 3600) -> None:
        self._db = db
        self._bucket = bucket
        self._url_ttl = url_ttl

    def create_upload_target(self, user_id: str) -> UploadTarget:
        path = f"{user_id}/{uuid.uuid4().hex}"
        try:
            response = self._db.storage.from_(self._bucket).create_signed_upload_url(path)
        except Exception as e:
            logger.error(f"Signed upload URL for {path} failed: {e}")
            raise PhotoStorageError(str(e), self._bucket) from e

        upload_url = _pick(response, "signed_url", "signedUrl", "signedURL")
        if not upload_url:
            raise PhotoStorageError("no upload URL returned", self._bucket)

        return UploadTarget(
            path=response.get("path") or path,
            upload_url=upload_url,
            token=response.get("token"),
        )

    def signed_url(self, path: str) -> Optional[str]:
        """Download URL for path, or None when the object can't be signed."""
        try:
            response = self._db.storage.from_(self._bucket).create_signed_url(path, self._url_ttl)
        except Exception as e:
            logger.warning(f"Signed URL for {path} unavailable: {e}")
            return None
        return _pick(response, "signedURL", "signedUrl", "signed_url")


def _pick(response: dict[str, Any], *keys: str) -> Optional[str]:
    # storage3 has spelled these keys differently across releases
    for key in keys:
        if response.get(key):
            return response[key]
    return None
