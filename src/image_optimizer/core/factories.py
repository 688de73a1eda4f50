"""Factory for creating a configured optimization service."""

from typing import Optional

from .acquisition import ImageFetcher
from .config import StorageSettings
from .observability import MetricsCollector, StructuredLogger
from .protocols import HttpSessionProtocol, LoggerProtocol, S3ClientProtocol
from .services import ImageOptimizationService
from .storage import SpacesUploader
from .transcoding import AvifTranscoder


class OptimizerFactory:
    """Wires fetcher, transcoder and uploader from explicit settings."""

    @staticmethod
    def create_service(
        settings: Optional[StorageSettings] = None,
        s3_client: Optional[S3ClientProtocol] = None,
        http_session: Optional[HttpSessionProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> ImageOptimizationService:
        """Create a fully configured service; settings default to the environment."""
        if settings is None:
            settings = StorageSettings.from_env()

        if logger is None:
            logger = StructuredLogger("pipeline")

        return ImageOptimizationService(
            fetcher=ImageFetcher(session=http_session, timeout=settings.fetch_timeout),
            transcoder=AvifTranscoder(quality=settings.quality),
            uploader=SpacesUploader(settings, s3_client=s3_client),
            logger=logger,
            metrics_collector=metrics_collector,
        )
