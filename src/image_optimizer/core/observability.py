"""Observability utilities for logging and stage metrics."""

import logging
import uuid
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, field

from .logging_config import get_logger


@dataclass
class LogContext:
    """Correlation id, stage name and request metadata attached to log lines."""

    correlation_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    operation: str = ""
    component: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    def with_operation(self, operation: str) -> "LogContext":
        return LogContext(
            correlation_id=self.correlation_id,
            operation=operation,
            component=self.component,
            metadata=dict(self.metadata),
        )

    def with_metadata(self, **kwargs: Any) -> "LogContext":
        """Copy of this context with ``kwargs`` merged into the metadata."""
        return LogContext(
            correlation_id=self.correlation_id,
            operation=self.operation,
            component=self.component,
            metadata={**self.metadata, **kwargs},
        )


def render(message: str, context: Optional[LogContext] = None, **kwargs: Any) -> str:
    """Render ``[operation] [correlation_id] message (key=value, ...)``."""
    if context is None:
        return message

    prefix = f"[{context.operation}] " if context.operation else ""
    line = f"{prefix}[{context.correlation_id}] {message}"
    fields = {**context.metadata, **kwargs}
    if fields:
        line += " (" + ", ".join(f"{k}={v}" for k, v in fields.items()) + ")"
    return line


class StructuredLogger:
    """Writes context-rich lines to a logger nested under the package logger."""

    def __init__(self, name: str = "pipeline"):
        self._logger = get_logger(name)

    def debug(self, message: str, context: Optional[LogContext] = None, **kwargs: Any) -> None:
        self._logger.log(logging.DEBUG, render(message, context, **kwargs))

    def info(self, message: str, context: Optional[LogContext] = None, **kwargs: Any) -> None:
        self._logger.log(logging.INFO, render(message, context, **kwargs))

    def error(self, message: str, context: Optional[LogContext] = None, **kwargs: Any) -> None:
        self._logger.log(logging.ERROR, render(message, context, **kwargs))


@dataclass
class PerformanceMetrics:
    """Timing of a single pipeline stage."""

    operation: str
    start_time: float
    end_time: float
    success: bool
    error_message: Optional[str] = None

    @property
    def duration_ms(self) -> float:
        return (self.end_time - self.start_time) * 1000


class MetricsCollector:
    """Collector for performance metrics."""

    def __init__(self) -> None:
        self._metrics: List[PerformanceMetrics] = []

    def record_metric(self, metric: PerformanceMetrics) -> None:
        self._metrics.append(metric)

    def get_metrics(self, operation: Optional[str] = None) -> List[PerformanceMetrics]:
        """Get recorded metrics, optionally filtered by operation."""
        if operation:
            return [m for m in self._metrics if m.operation == operation]
        return self._metrics.copy()

    def get_summary(self) -> Dict[str, Any]:
        """Summarize recorded stages as per-stage durations plus totals."""
        if not self._metrics:
            return {}

        return {
            "stages": {m.operation: round(m.duration_ms, 2) for m in self._metrics},
            "failed_stages": [m.operation for m in self._metrics if not m.success],
            "total_duration_ms": round(sum(m.duration_ms for m in self._metrics), 2),
        }
