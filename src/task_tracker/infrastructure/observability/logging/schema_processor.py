"""Structlog processor that nests flat event fields into the service log schema.

Output shape::

    {timestamp, level, service, environment, correlation_id, message,
     processing?, error?, context?, extra?}

Optional blocks only appear when their trigger key is present.
"""

from __future__ import annotations

import os
from typing import Any

SERVICE_NAME_DEFAULT = "task-tracker"


def _root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", SERVICE_NAME_DEFAULT),
        "environment": os.environ.get("APP_ENV", "local"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "message": event_dict.pop("event", ""),
    }


def _processing_block(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    duration = event_dict.pop("processing_duration_ms", None)
    return {
        "status": status,
        "duration_ms": float(duration) if isinstance(duration, int | float) else None,
        "http_status": event_dict.pop("http_status", None),
    }


def _error_block(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "details": event_dict.pop("error_details", None),
    }


def _context_block(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    endpoint = event_dict.pop("context_endpoint", None)
    method = event_dict.pop("context_method", None)
    component = event_dict.pop("context_component", None)
    if endpoint is None and method is None and component is None:
        return None
    return {"component": component, "endpoint": endpoint, "method": method}


def service_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    result = _root_fields(event_dict)

    for key, build in (
        ("processing", _processing_block),
        ("error", _error_block),
        ("context", _context_block),
    ):
        block = build(event_dict)
        if block is not None:
            result[key] = block

    if event_dict:
        result["extra"] = dict(event_dict)
    return result
