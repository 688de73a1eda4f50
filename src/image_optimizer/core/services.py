"""Service orchestrating acquire -> transcode -> upload -> URL."""

from typing import Callable, Optional

from .acquisition import ImageFetcher
from .error_handling import PipelineRun
from .image_utils import build_object_key, describe_source
from .models import OptimizeImageRequest, OptimizeImageResult, PipelineStage
from .observability import LogContext, MetricsCollector
from .protocols import LoggerProtocol
from .storage import SpacesUploader
from .transcoding import AvifTranscoder


class ImageOptimizationService:
    """Runs one optimize-and-upload request through all stages in order."""

    def __init__(
        self,
        fetcher: ImageFetcher,
        transcoder: AvifTranscoder,
        uploader: SpacesUploader,
        logger: LoggerProtocol,
        metrics_collector: Optional[MetricsCollector] = None,
        key_factory: Callable[[str, str], str] = build_object_key,
    ):
        self._fetcher = fetcher
        self._transcoder = transcoder
        self._uploader = uploader
        self._logger = logger
        self._metrics_collector = metrics_collector
        self._key_factory = key_factory
        self.last_run: Optional[PipelineRun] = None

    def optimize(self, request: OptimizeImageRequest) -> OptimizeImageResult:
        """
        Optimize the source image and upload it to the destination.

        Either returns the full result or raises the error of the stage that
        failed; nothing is returned on failure. Missing storage credentials
        fail the run during acquisition, before the source is touched.
        """
        dest = request.dest
        source_name = describe_source(request.source)
        object_key = self._key_factory(dest.object_folder, dest.object_slug)

        log_context = LogContext(component="image_optimization_service").with_metadata(
            source=source_name,
            bucket=dest.bucket_name,
            object_key=object_key,
        )
        run = PipelineRun(log_context)
        self.last_run = run

        with run.stage_context(PipelineStage.ACQUIRING, self._logger, self._metrics_collector):
            # Credentials are checked before anything is read or downloaded
            self._uploader.settings.require_credentials()
            image_bytes = self._fetcher.acquire(request.source)

        with run.stage_context(PipelineStage.TRANSCODING, self._logger, self._metrics_collector):
            encoded = self._transcoder.transcode(image_bytes)

        with run.stage_context(PipelineStage.UPLOADING, self._logger, self._metrics_collector):
            self._uploader.upload(dest.bucket_name, object_key, encoded)

        run.stage = PipelineStage.DONE
        self._logger.info(
            f"File '{source_name}' uploaded successfully to '{dest.bucket_name}/{object_key}'.",
            log_context,
            original_bytes=len(image_bytes),
            optimized_bytes=len(encoded),
        )

        return OptimizeImageResult(
            optimized_img_url=self._uploader.public_url(dest.bucket_name, object_key)
        )
