"""Testing utilities and fakes for the image optimizer."""

from .fakes import (
    FakeHttpSession,
    FakeLogger,
    FakeResponse,
    FakeS3Client,
    S3Bucket,
    S3Object,
    create_test_image,
)

__all__ = [
    "FakeHttpSession",
    "FakeLogger",
    "FakeResponse",
    "FakeS3Client",
    "S3Bucket",
    "S3Object",
    "create_test_image",
]
