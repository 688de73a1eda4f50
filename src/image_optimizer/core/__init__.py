"""Core components of the image optimizer."""

from .acquisition import ImageFetcher
from .config import StorageSettings
from .exceptions import (
    AcquisitionError,
    AcquisitionFailure,
    ConfigurationError,
    ImageOptimizerError,
    TranscodingError,
    UploadError,
)
from .factories import OptimizerFactory
from .image_utils import build_cdn_url, build_object_key
from .logging_config import get_logger, setup_logger
from .models import (
    LocalImageSource,
    OptimizeImageRequest,
    OptimizeImageResult,
    PipelineStage,
    RemoteImageSource,
    UploadDestination,
)
from .services import ImageOptimizationService
from .storage import SpacesUploader
from .transcoding import AvifTranscoder

__all__ = [
    "AcquisitionError",
    "AcquisitionFailure",
    "AvifTranscoder",
    "ConfigurationError",
    "ImageFetcher",
    "ImageOptimizationService",
    "ImageOptimizerError",
    "LocalImageSource",
    "OptimizeImageRequest",
    "OptimizeImageResult",
    "OptimizerFactory",
    "PipelineStage",
    "RemoteImageSource",
    "SpacesUploader",
    "StorageSettings",
    "TranscodingError",
    "UploadDestination",
    "UploadError",
    "build_cdn_url",
    "build_object_key",
    "get_logger",
    "setup_logger",
]
