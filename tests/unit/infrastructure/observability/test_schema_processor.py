from task_tracker.infrastructure.observability.logging.schema_processor import (
    service_schema_processor,
)


def test_root_fields_and_extra(monkeypatch):
    monkeypatch.setenv("SERVICE_NAME", "tracker-test")
    monkeypatch.setenv("APP_ENV", "qa")
    event = {
        "event": "Task created",
        "level": "info",
        "timestamp": "2024-05-01T12:00:00Z",
        "correlation_id": "abc",
        "task_id": "t-1",
    }

    result = service_schema_processor(None, "info", event)

    assert result == {
        "timestamp": "2024-05-01T12:00:00Z",
        "level": "info",
        "service": "tracker-test",
        "environment": "qa",
        "correlation_id": "abc",
        "message": "Task created",
        "extra": {"task_id": "t-1"},
    }


def test_optional_blocks_are_nested():
    event = {
        "event": "Request processed",
        "processing_status": "ERROR",
        "processing_duration_ms": 12.5,
        "http_status": 503,
        "error_type": "StoreUnavailableError",
        "error_details": "connection refused",
        "context_endpoint": "/api/v1/tasks",
        "context_method": "GET",
    }

    result = service_schema_processor(None, "error", event)

    assert result["processing"] == {"status": "ERROR", "duration_ms": 12.5, "http_status": 503}
    assert result["error"] == {"type": "StoreUnavailableError", "details": "connection refused"}
    assert result["context"] == {"component": None, "endpoint": "/api/v1/tasks", "method": "GET"}
    assert "extra" not in result


def test_blocks_omitted_without_trigger_keys():
    result = service_schema_processor(None, "info", {"event": "hello"})

    assert set(result) == {"timestamp", "level", "service", "environment", "correlation_id", "message"}
