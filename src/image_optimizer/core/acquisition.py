"""Obtain raw image bytes from the local filesystem or a remote URL."""

from pathlib import Path
from typing import Optional, Union

import requests

from .exceptions import AcquisitionError, AcquisitionFailure
from .models import LocalImageSource, RemoteImageSource
from .protocols import HttpSessionProtocol


class ImageFetcher:
    """Reads or downloads source images. Single attempt, no retries."""

    def __init__(
        self,
        session: Optional[HttpSessionProtocol] = None,
        timeout: Optional[float] = None,
    ):
        self._session = session
        self._timeout = timeout

    def acquire(self, source: Union[LocalImageSource, RemoteImageSource]) -> bytes:
        """Return the raw bytes for ``source``."""
        if isinstance(source, LocalImageSource):
            return self.read_local(source.file_path)
        if isinstance(source, RemoteImageSource):
            return self.download(source.file_url)
        raise AcquisitionError(
            f"Invalid input type: {type(source).__name__}",
            reason=AcquisitionFailure.INVALID_SOURCE,
        )

    def read_local(self, file_path: str) -> bytes:
        """Read a file from local storage."""
        try:
            return Path(file_path).read_bytes()
        except OSError as e:
            raise AcquisitionError(
                f"Failed to read image from {file_path}: {e}",
                reason=AcquisitionFailure.READ_FAILURE,
            ) from e

    def download(self, url: str) -> bytes:
        """Download an image with a single HTTP GET."""
        session = self._session if self._session is not None else requests.Session()
        try:
            response = session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise AcquisitionError(
                f"Failed to download image from {url}: {e}",
                reason=AcquisitionFailure.NETWORK_FAILURE,
            ) from e
        finally:
            if self._session is None:
                session.close()

        if not 200 <= response.status_code < 300:
            raise AcquisitionError(
                f"Failed to download image from {url}: "
                f"{response.status_code} {response.reason}",
                reason=AcquisitionFailure.HTTP_FAILURE,
                status=response.status_code,
            )
        return response.content
