"""Media host client: uploads listing photos to an S3-compatible bucket.

Images arrive from the admin panel as base64 data URIs. Each one is
validated with Pillow, cropped to fill 800x600 and stored under the given
folder with a random name. The public URL of the stored object is returned.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
import uuid
from io import BytesIO

import boto3
from botocore.client import Config as BotoConfig
from botocore.exceptions import BotoCoreError, ClientError
from django.conf import settings  # type: ignore
from PIL import Image, ImageOps, UnidentifiedImageError

logger = logging.getLogger(__name__)

DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w/+.-]+)?;base64,(?P<payload>.+)$", re.DOTALL)

ALLOWED_FORMATS = {
    "JPEG": ("jpg", "image/jpeg"),
    "PNG": ("png", "image/png"),
    "WEBP": ("webp", "image/webp"),
}

TARGET_SIZE = (800, 600)


class MediaUploadError(Exception):
    """The media host rejected or could not store an image."""


def is_remote_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


class MediaUploader:
    """Thin wrapper over the boto3 S3 client."""

    def __init__(self, config: dict | None = None):
        config = config or settings.MEDIA_HOST
        self.bucket_name = config["BUCKET_NAME"]
        self.public_base = (config.get("PUBLIC_BASE") or "").rstrip("/")
        self.max_size = config.get("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)
        self.s3_client = boto3.client(
            "s3",
            endpoint_url=config.get("ENDPOINT_URL"),
            aws_access_key_id=config.get("ACCESS_KEY") or None,
            aws_secret_access_key=config.get("SECRET_KEY") or None,
            region_name=config.get("REGION"),
            config=BotoConfig(signature_version="s3v4"),
        )

    # ---------- image utils ----------

    def _decode(self, data_uri: str) -> bytes:
        match = DATA_URI_RE.match(data_uri.strip())
        payload = match.group("payload") if match else data_uri
        try:
            raw = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise MediaUploadError("Image is not valid base64 data") from exc
        if len(raw) > self.max_size:
            raise MediaUploadError(
                f"Image is too large. Maximum is {self.max_size / 1024 / 1024:.1f} MB"
            )
        return raw

    def _prepare(self, raw: bytes) -> tuple[bytes, str, str]:
        try:
            img = Image.open(BytesIO(raw))
            img.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise MediaUploadError("Invalid image") from exc
        if img.format not in ALLOWED_FORMATS:
            raise MediaUploadError(f"Unsupported format: {img.format}")

        ext, content_type = ALLOWED_FORMATS[img.format]
        save_format = img.format
        if save_format == "JPEG" and img.mode not in ("RGB", "L"):
            img = img.convert("RGB")

        fitted = ImageOps.fit(img, TARGET_SIZE, Image.Resampling.LANCZOS)
        out = BytesIO()
        fitted.save(out, format=save_format, quality=85)
        return out.getvalue(), ext, content_type

    def public_url(self, key: str) -> str:
        if self.public_base:
            return f"{self.public_base}/{key}"
        return f"https://{self.bucket_name}.s3.amazonaws.com/{key}"

    # ---------- upload API ----------

    def upload_base64(self, data_uri: str, folder: str) -> str:
        body, ext, content_type = self._prepare(self._decode(data_uri))
        key = f"{folder.strip('/')}/{uuid.uuid4().hex}.{ext}"
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=body,
                ContentType=content_type,
                CacheControl="max-age=31536000",
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Media host error for %s: %s", key, exc)
            raise MediaUploadError(str(exc)) from exc

        logger.info("Uploaded image %s", key)
        return self.public_url(key)

    def upload_many(self, data_uris: list[str], folder: str) -> list[str]:
        return [self.upload_base64(item, folder) for item in data_uris]


def get_uploader() -> MediaUploader:
    return MediaUploader()
