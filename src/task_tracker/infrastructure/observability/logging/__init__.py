from task_tracker.infrastructure.observability.logging.correlation_middleware import (
    CorrelationMiddleware,
)
from task_tracker.infrastructure.observability.logging.schema_processor import (
    service_schema_processor,
)

__all__ = [
    "CorrelationMiddleware",
    "service_schema_processor",
]
