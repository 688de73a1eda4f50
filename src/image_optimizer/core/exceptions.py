"""Custom exceptions for the image optimizer."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ImageOptimizerError(Exception):
    """Base exception for all image optimizer errors."""


class ConfigurationError(ImageOptimizerError):
    """Error raised for missing or invalid configuration."""


class AcquisitionFailure(str, Enum):
    """Why raw image bytes could not be obtained."""

    READ_FAILURE = "read_failure"
    HTTP_FAILURE = "http_failure"
    NETWORK_FAILURE = "network_failure"
    INVALID_SOURCE = "invalid_source"


class AcquisitionError(ImageOptimizerError):
    """Error raised when reading or downloading the source image fails."""

    def __init__(
        self,
        message: str,
        reason: AcquisitionFailure,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.status = status


class TranscodingError(ImageOptimizerError):
    """Error raised when the source bytes cannot be decoded or re-encoded."""


class UploadError(ImageOptimizerError):
    """Error raised when the object storage upload fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause
