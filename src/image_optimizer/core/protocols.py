"""Protocol definitions for dependency injection and testability."""

from typing import Any, BinaryIO, Dict, Optional, Protocol


class S3ClientProtocol(Protocol):
    """Protocol for the S3 client operations used by the uploader."""

    def upload_fileobj(
        self,
        Fileobj: BinaryIO,
        Bucket: str,
        Key: str,
        ExtraArgs: Optional[Dict[str, Any]] = None,
        Callback: Any = None,
        Config: Any = None,
    ) -> None:
        """Managed (single or multipart) upload of a file-like object."""
        ...


class HttpResponseProtocol(Protocol):
    """The parts of ``requests.Response`` the fetcher reads."""

    status_code: int
    reason: str
    content: bytes


class HttpSessionProtocol(Protocol):
    """Protocol for the HTTP session used to download remote images."""

    def get(
        self,
        url: str,
        timeout: Optional[float] = None,
    ) -> HttpResponseProtocol:
        """Issue a GET request."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def error(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log error message."""
        ...
