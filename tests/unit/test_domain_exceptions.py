"""Unit tests for domain exceptions."""

from src.domain.exceptions import (
    DomainException,
    InvalidInvocation,
    InvalidState,
    MalformedUpstreamResponse,
    MissingCredentialError,
    UnknownTool,
    UpstreamError,
)


class TestDomainException:
    """Tests for base DomainException."""

    def test_is_exception(self):
        exc = DomainException("Test error")
        assert isinstance(exc, Exception)

    def test_message(self):
        exc = DomainException("Custom message")
        assert str(exc) == "Custom message"


class TestInvalidInvocation:
    """Tests for InvalidInvocation."""

    def test_attributes(self):
        exc = InvalidInvocation("get_task", "taskId: Field required")
        assert exc.tool_name == "get_task"
        assert exc.reason == "taskId: Field required"
        assert "get_task" in str(exc)
        assert "taskId" in str(exc)
        assert isinstance(exc, DomainException)


class TestUnknownTool:
    """Tests for UnknownTool."""

    def test_message_contains_name(self):
        exc = UnknownTool("transcode_video")
        assert exc.tool_name == "transcode_video"
        assert str(exc) == "Unknown tool: transcode_video"


class TestInvalidState:
    """Tests for InvalidState."""

    def test_attributes(self):
        exc = InvalidState("task-1", "indexing")
        assert exc.task_id == "task-1"
        assert exc.status == "indexing"
        assert "indexing" in str(exc)
        assert "'ready' or 'failed'" in str(exc)


class TestUpstreamError:
    """Tests for UpstreamError."""

    def test_status_and_body_in_message(self):
        exc = UpstreamError(500, '{"message":"boom"}')
        assert exc.status_code == 500
        assert exc.body == '{"message":"boom"}'
        assert "500" in str(exc)
        assert "boom" in str(exc)


class TestMalformedUpstreamResponse:
    """Tests for MalformedUpstreamResponse."""

    def test_body_in_message(self):
        exc = MalformedUpstreamResponse("<html>Bad Gateway</html>")
        assert exc.body == "<html>Bad Gateway</html>"
        assert "Bad Gateway" in str(exc)
        assert "not valid JSON" in str(exc)

    def test_custom_reason(self):
        exc = MalformedUpstreamResponse("[]", reason="Expected a JSON object")
        assert "Expected a JSON object" in str(exc)


class TestMissingCredentialError:
    """Tests for MissingCredentialError."""

    def test_names_variable(self):
        exc = MissingCredentialError("TWELVELABS_API_KEY")
        assert exc.variable == "TWELVELABS_API_KEY"
        assert "TWELVELABS_API_KEY" in str(exc)
