"""Celery task wrapping the optimize-and-upload pipeline."""

import os
from typing import Any, Dict

from celery import Celery

from .core import OptimizeImageRequest, OptimizerFactory, get_logger
from .core.observability import MetricsCollector

TASK_NAME = "upload-optimized-image"
MAX_DURATION_SECONDS = 30

celery_app = Celery(
    "image_optimizer",
    broker=os.getenv("CELERY_BROKER_URL", "memory://"),
    backend=os.getenv("CELERY_RESULT_BACKEND", "cache+memory://"),
)
celery_app.conf.update(
    task_serializer="json",
    result_serializer="json",
    accept_content=["json"],
)

logger = get_logger("task")


@celery_app.task(
    name=TASK_NAME,
    time_limit=MAX_DURATION_SECONDS,
    soft_time_limit=MAX_DURATION_SECONDS - 2,
)
def upload_optimized_image(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Optimize the image described by ``payload`` and upload it.

    Returns ``{"result": {"optimized_img_url": ...}}``. Errors propagate so
    the worker marks the task failed; retries are left to Celery.
    """
    logger.info(f"optimizing {payload}")
    request = OptimizeImageRequest.model_validate(payload)

    metrics = MetricsCollector()
    service = OptimizerFactory.create_service(metrics_collector=metrics)
    try:
        result = service.optimize(request)
    finally:
        logger.info(f"usage {metrics.get_summary()}")

    return {"result": result.model_dump()}
