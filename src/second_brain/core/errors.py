"""Failure taxonomy for a single query round trip."""

UNEXPECTED_FORMAT_MESSAGE = "Unexpected response format from API"


class QueryClientError(RuntimeError):
    """Base class for failures converted to the error state by the lifecycle."""


class TransportError(QueryClientError):
    """Raised when the answering service cannot be reached."""


class HttpStatusError(QueryClientError):
    def __init__(self, status_code: int):
        super().__init__(f"HTTP error! status: {status_code}")
        self.status_code = status_code


class FormatError(QueryClientError):
    def __init__(self, message: str = UNEXPECTED_FORMAT_MESSAGE):
        super().__init__(message)
