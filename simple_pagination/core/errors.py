"""Pagination error classes.

All errors raised by this package derive from PaginationError and carry a
machine-readable code, a message, and an HTTP status so API layers can map
them without inspecting the message text.

Cancellation is not represented here: asyncio.CancelledError propagates
unchanged. Failures raised by a query engine also propagate unchanged.
"""


class PaginationError(Exception):
    """Base class for pagination errors.

    Attributes:
        code: Machine-readable error code (e.g., "INVALID_ARGUMENT").
        message: Human-readable error message.
        status_code: HTTP status code an API layer should return.
        details: Optional list of additional error details.
    """

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: list[dict] | None = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(message)


class InvalidArgumentError(PaginationError, ValueError):
    """Invalid pagination input (400).

    Raised for negative page numbers or sizes, a missing source, or a source
    that cannot be paginated. Always raised before any traversal or remote
    call.
    """

    def __init__(
        self,
        message: str,
        details: list[dict] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_ARGUMENT",
            message=message,
            status_code=400,
            details=details,
        )
