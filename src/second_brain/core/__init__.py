"""Core client contracts: configuration, request states, and failure taxonomy."""

from .config import ClientConfig
from .errors import FormatError, HttpStatusError, QueryClientError, TransportError
from .types import Error, ErrorKind, Idle, Loading, RequestState, StateListener, Success

__all__ = [
    "ClientConfig",
    "Error",
    "ErrorKind",
    "FormatError",
    "HttpStatusError",
    "Idle",
    "Loading",
    "QueryClientError",
    "RequestState",
    "StateListener",
    "Success",
    "TransportError",
]
