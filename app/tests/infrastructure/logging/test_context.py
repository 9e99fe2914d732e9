import structlog

from infrastructure.logging.context import bind_request_context, get_correlation_id


def test_bind_request_context_binds_and_unbinds():
    with bind_request_context(
        correlation_id="req-1", request_path="/webhook", request_method="POST"
    ):
        ctx = structlog.contextvars.get_contextvars()
        assert ctx["correlation_id"] == "req-1"
        assert ctx["request_path"] == "/webhook"
        assert ctx["request_method"] == "POST"
        assert get_correlation_id() == "req-1"

    assert get_correlation_id() is None
    assert "request_path" not in structlog.contextvars.get_contextvars()


def test_bind_request_context_generates_correlation_id():
    with bind_request_context():
        correlation_id = get_correlation_id()
        assert correlation_id
        assert len(correlation_id) == 36
