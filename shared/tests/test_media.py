"""Tests for the media host client."""

from __future__ import annotations

import base64
from io import BytesIO
from unittest import mock

from botocore.exceptions import ClientError
from django.conf import settings
from django.test import SimpleTestCase
from PIL import Image

from shared.infrastructure.media import MediaUploader, MediaUploadError, is_remote_url

FOLDER = "horoo-properties/rooms/HRM0001"


def data_uri(fmt: str = "PNG", size: tuple[int, int] = (1600, 900)) -> str:
    buffer = BytesIO()
    Image.new("RGB", size, (200, 30, 30)).save(buffer, format=fmt)
    return f"data:image/{fmt.lower()};base64,{base64.b64encode(buffer.getvalue()).decode()}"


@mock.patch("shared.infrastructure.media.boto3.client")
class MediaUploaderTests(SimpleTestCase):
    def test_upload_fills_target_size_and_returns_public_url(self, client) -> None:
        uploader = MediaUploader()

        url = uploader.upload_base64(data_uri(), FOLDER)

        client.return_value.put_object.assert_called_once()
        kwargs = client.return_value.put_object.call_args.kwargs
        self.assertEqual(kwargs["Bucket"], "horoo-test")
        self.assertTrue(kwargs["Key"].startswith(f"{FOLDER}/"))
        self.assertTrue(kwargs["Key"].endswith(".png"))
        self.assertEqual(kwargs["ContentType"], "image/png")
        self.assertEqual(Image.open(BytesIO(kwargs["Body"])).size, (800, 600))
        self.assertEqual(url, f"{settings.MEDIA_HOST['PUBLIC_BASE']}/{kwargs['Key']}")

    def test_jpeg_keeps_its_format(self, client) -> None:
        MediaUploader().upload_base64(data_uri("JPEG", (400, 400)), FOLDER)

        kwargs = client.return_value.put_object.call_args.kwargs
        self.assertTrue(kwargs["Key"].endswith(".jpg"))
        self.assertEqual(kwargs["ContentType"], "image/jpeg")

    def test_invalid_base64_is_rejected(self, client) -> None:
        with self.assertRaises(MediaUploadError):
            MediaUploader().upload_base64("data:image/png;base64,not-base64!!", FOLDER)
        client.return_value.put_object.assert_not_called()

    def test_unsupported_format_is_rejected(self, client) -> None:
        with self.assertRaises(MediaUploadError):
            MediaUploader().upload_base64(data_uri("GIF"), FOLDER)

    def test_oversized_image_is_rejected(self, client) -> None:
        uploader = MediaUploader({**settings.MEDIA_HOST, "MAX_UPLOAD_BYTES": 64})

        with self.assertRaises(MediaUploadError):
            uploader.upload_base64(data_uri(), FOLDER)

    def test_storage_errors_become_upload_errors(self, client) -> None:
        client.return_value.put_object.side_effect = ClientError(
            {"Error": {"Code": "503", "Message": "Slow Down"}}, "PutObject"
        )

        with self.assertRaises(MediaUploadError):
            MediaUploader().upload_base64(data_uri(), FOLDER)

    def test_upload_many(self, client) -> None:
        urls = MediaUploader().upload_many([data_uri(), data_uri("JPEG")], f"{FOLDER}/gallery")

        self.assertEqual(len(urls), 2)
        self.assertEqual(client.return_value.put_object.call_count, 2)

    def test_remote_urls(self, client) -> None:
        self.assertTrue(is_remote_url("https://cdn.example.com/a.jpg"))
        self.assertFalse(is_remote_url("data:image/png;base64,AAAA"))
