"""Managed uploads to DigitalOcean Spaces through the S3 API."""

import io
from typing import Optional

import boto3
from boto3.exceptions import Boto3Error
from boto3.s3.transfer import TransferConfig
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from .config import StorageSettings
from .exceptions import ConfigurationError, UploadError
from .image_utils import AVIF_CONTENT_TYPE, build_cdn_url
from .logging_config import get_logger
from .protocols import S3ClientProtocol

PUBLIC_READ_ACL = "public-read"


class SpacesUploader:
    """
    Upload encoded images to a Spaces bucket.

    Payloads above ``settings.part_size`` go through boto3's multipart
    transfer with ``settings.max_concurrency`` worker threads; smaller ones
    are sent as a single PUT. boto3 aborts a failed multipart upload.
    """

    def __init__(
        self,
        settings: StorageSettings,
        s3_client: Optional[S3ClientProtocol] = None,
    ):
        self._settings = settings
        self._s3_client = s3_client

    @property
    def settings(self) -> StorageSettings:
        return self._settings

    def _create_client(self) -> S3ClientProtocol:
        session = boto3.Session()
        try:
            return session.client(  # type: ignore[return-value]
                "s3",
                region_name=self._settings.region,
                endpoint_url=self._settings.endpoint_url,
                aws_access_key_id=self._settings.access_key,
                aws_secret_access_key=self._settings.secret_key,
                # Spaces requires path-style addressing
                config=Config(s3={"addressing_style": "path"}),
            )
        except ValueError as e:
            # botocore rejects malformed endpoint URLs with ValueError
            raise ConfigurationError(
                f"Invalid storage endpoint {self._settings.endpoint_url!r}: {e}"
            ) from e

    def transfer_config(self) -> TransferConfig:
        return TransferConfig(
            multipart_threshold=self._settings.part_size,
            multipart_chunksize=self._settings.part_size,
            max_concurrency=self._settings.max_concurrency,
            use_threads=True,
        )

    def upload(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str = AVIF_CONTENT_TYPE,
    ) -> None:
        """
        Upload ``body`` to ``bucket/key`` with a public-read ACL.

        Raises:
            ConfigurationError: A credential is missing (raised before the
                client is created or called) or the endpoint is malformed
            UploadError: Any failure reported by boto3 or botocore
        """
        self._settings.require_credentials()
        if self._s3_client is None:
            self._s3_client = self._create_client()

        logger = get_logger("storage")
        logger.debug(f"Uploading {len(body)} bytes to {bucket}/{key}")
        try:
            self._s3_client.upload_fileobj(
                io.BytesIO(body),
                bucket,
                key,
                ExtraArgs={"ACL": PUBLIC_READ_ACL, "ContentType": content_type},
                Config=self.transfer_config(),
            )
        except (Boto3Error, BotoCoreError, ClientError) as e:
            raise UploadError(f"Failed to upload {bucket}/{key}: {e}", cause=e) from e

    def public_url(self, bucket: str, key: str) -> str:
        """CDN URL for an object uploaded by this uploader."""
        return build_cdn_url(bucket, self._settings.region, key, self._settings.cdn_domain)
