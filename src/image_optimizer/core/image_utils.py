"""Object key and URL helpers for the image optimizer."""

import posixpath
import uuid
from typing import Callable, Union

from .models import LocalImageSource, RemoteImageSource

AVIF_EXTENSION = "avif"
AVIF_CONTENT_TYPE = "image/avif"


def build_object_key(
    folder: str,
    slug: str,
    extension: str = AVIF_EXTENSION,
    id_factory: Callable[[], object] = uuid.uuid4,
) -> str:
    """
    Build a unique object key of the form ``folder/slug-<uuid>.<ext>``.

    Keys are random rather than content addressed, so uploading the same
    image twice yields two objects.

    Args:
        folder: Destination folder inside the bucket (may be empty)
        slug: Human readable prefix of the file name
        extension: File extension without the dot
        id_factory: Source of the unique suffix

    Returns:
        Object key using forward slashes
    """
    file_name = f"{slug}-{id_factory()}.{extension}"
    folder = folder.strip("/")
    if not folder:
        return file_name
    return posixpath.join(folder, file_name)


def build_cdn_url(bucket: str, region: str, object_key: str, cdn_domain: str) -> str:
    """Public CDN URL of an object: ``https://{bucket}.{region}.cdn.{domain}/{key}``."""
    return f"https://{bucket}.{region}.cdn.{cdn_domain}/{object_key}"


def describe_source(source: Union[LocalImageSource, RemoteImageSource]) -> str:
    """Path or URL of a source, for log lines."""
    if isinstance(source, LocalImageSource):
        return source.file_path
    return source.file_url
