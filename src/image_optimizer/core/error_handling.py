"""Stage boundary that logs, times and re-raises pipeline failures."""

import time
from typing import Optional

from .models import PipelineStage
from .observability import LogContext, MetricsCollector, PerformanceMetrics
from .protocols import LoggerProtocol


class PipelineStageContext:
    """
    Context manager wrapped around one pipeline stage.

    On entry it moves the run to ``stage``; on a clean exit it records a
    successful metric. On an exception it marks the run ``FAILED``, keeps
    the exception on ``error``, logs it with the stage context and lets it
    propagate unchanged.
    """

    def __init__(
        self,
        run: "PipelineRun",
        stage: PipelineStage,
        logger: LoggerProtocol,
        metrics_collector: Optional[MetricsCollector] = None,
    ):
        self.run = run
        self.stage = stage
        self.logger = logger
        self.metrics_collector = metrics_collector
        self.context = run.log_context.with_operation(stage.value)
        self._start_time = 0.0

    def __enter__(self) -> "PipelineStageContext":
        self.run.stage = self.stage
        self._start_time = time.perf_counter()
        self.logger.debug(f"Starting {self.stage.value}", self.context)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        end_time = time.perf_counter()
        success = exc_type is None

        if self.metrics_collector is not None:
            self.metrics_collector.record_metric(
                PerformanceMetrics(
                    operation=self.stage.value,
                    start_time=self._start_time,
                    end_time=end_time,
                    success=success,
                    error_message=None if success else str(exc_val),
                )
            )

        if success:
            self.logger.debug(
                f"Completed {self.stage.value}",
                self.context,
                duration_ms=round((end_time - self._start_time) * 1000, 2),
            )
        else:
            self.run.stage = PipelineStage.FAILED
            self.run.failed_stage = self.stage
            self.run.error = exc_val
            self.logger.error(
                f"Failed {self.stage.value}: {exc_type.__name__}: {exc_val}",
                self.context,
            )

        # Propagate the original exception
        return False


class PipelineRun:
    """Mutable state of a single invocation: current stage and failure."""

    def __init__(self, log_context: Optional[LogContext] = None):
        self.log_context = log_context or LogContext()
        self.stage = PipelineStage.ACQUIRING
        self.failed_stage: Optional[PipelineStage] = None
        self.error: Optional[BaseException] = None

    def stage_context(
        self,
        stage: PipelineStage,
        logger: LoggerProtocol,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> PipelineStageContext:
        return PipelineStageContext(self, stage, logger, metrics_collector)
