# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # the displayed index does not point at a record
    INVALID_INDEX = "INVALID_INDEX"

    # === Constraint Violations ===
    DUPLICATE_STUDENT_ID = "DUPLICATE_STUDENT_ID"

    # === Validation Failures ===
    # input structure is malformed or incomplete
    INVALID_INPUT = "INVALID_INPUT"

    # the value is valid in isolation, but violates roster rules
    VALIDATION_FAILED = "VALIDATION_FAILED"

    # an edit command carried no fields
    NOT_EDITED = "NOT_EDITED"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"

    @property
    def status_code(self) -> int:
        if self is ErrorCode.NOT_FOUND:
            return 404
        if self is ErrorCode.DUPLICATE_STUDENT_ID:
            return 409
        if self is ErrorCode.INTERNAL_ERROR:
            return 500
        return 400


class Response:
    """
    Outcome of a roster operation or a user command.

    Attributes:
        success (bool): Whether the operation completed.
        detail (str | None): Message for the user. On failure, the reason.
        error (ErrorCode | str | None): Machine-readable reason, set only on failure.
        status_code (int | None): HTTP-style code; 200 on success, derived from `error` on failure.
        data (dict): Payload, e.g. "record", "records", "view" or "exit".
        trace (str | None): Traceback text for unexpected errors.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = None,
        data: dict | None = None,
        trace: str | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = dict(data) if data else {}
        self._trace = trace

    # === properties ===

    @property
    def success(self) -> bool:
        return self._success

    @property
    def detail(self) -> str | None:
        return self._detail

    @property
    def error(self) -> ErrorCode | str | None:
        return self._error

    @property
    def status_code(self) -> int | None:
        return self._status_code

    @property
    def data(self) -> dict:
        return self._data

    @property
    def record(self):
        """The "record" payload, or None."""
        return self._data.get("record")

    @property
    def trace(self) -> str | None:
        return self._trace

    # === constructors ===

    @classmethod
    def succeed(cls, detail: str | None = None, data: dict | None = None) -> Response:
        return cls(success=True, detail=detail, status_code=200, data=data)

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = None,
        trace: str | None = None,
    ) -> Response:
        """
        Builds a failed response.

        Notes:
            - When `status_code` is omitted it comes from the `ErrorCode`, or 400 for string errors.
        """
        if status_code is None:
            status_code = error.status_code if isinstance(error, ErrorCode) else 400

        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            trace=trace,
        )

    # === dunder methods ===

    def __str__(self) -> str:
        if self._success:
            return f"Success: {self._detail or ''}"

        error_str = self._error.value if isinstance(self._error, Enum) else self._error or ""
        return f"Error [{error_str}]: {self._detail or ''}"
