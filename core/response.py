# core/response.py

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    # === Not Found ===
    NOT_FOUND = "NOT_FOUND"

    # category name is not a key of the course
    UNKNOWN_CATEGORY = "UNKNOWN_CATEGORY"

    # course position or assignment reference does not exist
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # === Constraint Violations ===
    DUPLICATE_CATEGORY = "DUPLICATE_CATEGORY"

    # the same assignment object is already in the category
    DUPLICATE_ASSIGNMENT = "DUPLICATE_ASSIGNMENT"

    # batch operation received no targets
    EMPTY_SELECTION = "EMPTY_SELECTION"

    # === Validation Failures ===
    # imported course data is not a well-formed JSON object
    MALFORMED_IMPORT = "MALFORMED_IMPORT"

    # field value could not be coerced to the expected type
    INVALID_FIELD_VALUE = "INVALID_FIELD_VALUE"

    # === Storage Faults ===
    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    QUOTA_EXCEEDED = "QUOTA_EXCEEDED"

    # === Internal Faults ===
    INTERNAL_ERROR = "INTERNAL_ERROR"
    LOGIC_ERROR = "LOGIC_ERROR"


class Response:
    """
    Standard Response object for Gradebook manipulator and lookup methods.

    Attributes:
        success (bool): Indicates whether the operation succeeded.
        detail (str | None): Optional human-readable explanation.
        error (ErrorCode | str | None): Optional machine-readable error identifier.
        status_code (int | None): Optional HTTP-style response code.
        data (dict): Optional payload, varies by operation.
        warning (str | None): Optional non-fatal problem, e.g. the change could not be persisted.
    """

    def __init__(
        self,
        success: bool,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = None,
        data: dict | None = None,
        warning: str | None = None,
    ):
        self._success = success
        self._detail = detail
        self._error = error
        self._status_code = status_code
        self._data = data or {}
        self._warning = warning

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
        return self._data or {}

    @property
    def warning(self) -> str | None:
        return self._warning

    # === public classmethods ===

    @classmethod
    def succeed(
        cls,
        detail: str | None = None,
        status_code: int | None = 200,
        data: dict | None = None,
        warning: str | None = None,
    ) -> Response:
        return cls(
            success=True,
            detail=detail,
            error=None,
            status_code=status_code,
            data=data,
            warning=warning,
        )

    @classmethod
    def fail(
        cls,
        detail: str | None = None,
        error: ErrorCode | str | None = None,
        status_code: int | None = 400,
        data: dict | None = None,
    ) -> Response:
        return cls(
            success=False,
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    # === dunder methods ===

    def __str__(self) -> str:
        if self.success:
            suffix = f" (warning: {self.warning})" if self.warning else ""
            return f"Success: {self.detail or ''}{suffix}"
        else:
            error_str = (
                self.error.value if isinstance(self.error, Enum) else self.error or ""
            )
            return f"Error: {error_str}"
