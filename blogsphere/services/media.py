import logging

import cloudinary.uploader
from fastapi import Depends

from blogsphere.config import Settings, get_settings

logger = logging.getLogger(__name__)


class UploadFailed(Exception):
    pass


class MediaUploader:
    """Pushes a local file or a remote URL to Cloudinary and hands back its public URL."""

    def __init__(self, settings: Settings):
        # Credentials go with each call; Cloudinary's process-wide config is left alone
        self.options = {
            "cloud_name": settings.cloudinary_cloud_name,
            "api_key": settings.cloudinary_api_key,
            "api_secret": settings.cloudinary_api_secret,
            "secure": True,
        }

    def upload(self, source) -> str:
        try:
            result = cloudinary.uploader.upload(source, **self.options)
            return result["secure_url"]
        except Exception as e:
            logger.exception("Media upload failed")
            raise UploadFailed(str(e)) from e


def get_media_uploader(settings: Settings = Depends(get_settings)) -> MediaUploader:
    return MediaUploader(settings)
