from __future__ import annotations

from recipe_editor.domain.errors import (
    EditorError,
    HydrationError,
    InvalidRecordError,
    RecordNotFoundError,
    SessionClosedError,
    StoreError,
    StoreRequestError,
    StoreTimeoutError,
    SubmissionError,
    SubmissionInProgressError,
)


class TestEditorError:
    def test_base_exception(self) -> None:
        error = EditorError("Base error")
        assert str(error) == "Base error"
        assert isinstance(error, Exception)


class TestRecordNotFoundError:
    def test_includes_record_id(self) -> None:
        error = RecordNotFoundError("abc-123")
        assert "abc-123" in str(error)
        assert error.record_id == "abc-123"


class TestStoreTimeoutError:
    def test_includes_url_and_timeout(self) -> None:
        error = StoreTimeoutError("http://api/recipes/1", 15.0)
        assert "http://api/recipes/1" in str(error)
        assert "15" in str(error)
        assert error.url == "http://api/recipes/1"
        assert error.timeout_seconds == 15.0


class TestStoreRequestError:
    def test_status_code_defaults_to_none(self) -> None:
        error = StoreRequestError("Connection refused")
        assert str(error) == "Connection refused"
        assert error.status_code is None

    def test_keeps_status_code(self) -> None:
        error = StoreRequestError("HTTP 500", status_code=500)
        assert error.status_code == 500


class TestHydrationError:
    def test_wraps_cause(self) -> None:
        cause = RecordNotFoundError("r1")
        error = HydrationError("r1", cause)
        assert "r1" in str(error)
        assert error.record_id == "r1"
        assert error.cause is cause


class TestSubmissionError:
    def test_wraps_cause(self) -> None:
        cause = StoreRequestError("HTTP 422", status_code=422)
        error = SubmissionError("r1", cause)
        assert "HTTP 422" in str(error)
        assert error.cause is cause


class TestSessionErrors:
    def test_in_progress_includes_record_id(self) -> None:
        error = SubmissionInProgressError("r1")
        assert "r1" in str(error)
        assert error.record_id == "r1"

    def test_closed_includes_record_id(self) -> None:
        error = SessionClosedError("r1")
        assert "closed" in str(error)
        assert error.record_id == "r1"


class TestExceptionHierarchy:
    def test_store_errors_inherit_from_store_error(self) -> None:
        assert issubclass(RecordNotFoundError, StoreError)
        assert issubclass(StoreTimeoutError, StoreError)
        assert issubclass(StoreRequestError, StoreError)
        assert issubclass(InvalidRecordError, StoreError)

    def test_all_errors_inherit_from_editor_error(self) -> None:
        assert issubclass(StoreError, EditorError)
        assert issubclass(HydrationError, EditorError)
        assert issubclass(SubmissionError, EditorError)
        assert issubclass(SubmissionInProgressError, EditorError)
        assert issubclass(SessionClosedError, EditorError)

    def test_session_errors_are_not_store_errors(self) -> None:
        assert not issubclass(HydrationError, StoreError)
        assert not issubclass(SubmissionError, StoreError)
