from __future__ import annotations


class EditorError(Exception):
    pass


class StoreError(EditorError):
    pass


class RecordNotFoundError(StoreError):
    def __init__(self, record_id: str):
        super().__init__(f"Recipe not found: {record_id}")
        self.record_id = record_id


class StoreTimeoutError(StoreError):
    def __init__(self, url: str, timeout_seconds: float):
        super().__init__(f"Store request timed out after {timeout_seconds}s: {url}")
        self.url = url
        self.timeout_seconds = timeout_seconds


class StoreRequestError(StoreError):
    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class InvalidRecordError(StoreError):
    pass


class HydrationError(EditorError):
    def __init__(self, record_id: str, cause: Exception):
        super().__init__(f"Failed to load recipe {record_id}: {cause}")
        self.record_id = record_id
        self.cause = cause


class SubmissionError(EditorError):
    def __init__(self, record_id: str, cause: Exception):
        super().__init__(f"Failed to update recipe {record_id}: {cause}")
        self.record_id = record_id
        self.cause = cause


class SubmissionInProgressError(EditorError):
    def __init__(self, record_id: str):
        super().__init__(f"A submission for recipe {record_id} is already in flight")
        self.record_id = record_id


class SessionClosedError(EditorError):
    def __init__(self, record_id: str):
        super().__init__(f"Edit session for recipe {record_id} is closed")
        self.record_id = record_id
