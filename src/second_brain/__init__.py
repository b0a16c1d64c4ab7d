from .core.config import ClientConfig
from .core.errors import FormatError, HttpStatusError, QueryClientError, TransportError
from .core.lifecycle import RequestLifecycle
from .core.types import Error, Idle, Loading, RequestState, Success
from .normalizer.service import classify_payload, normalize
from .presentation.form import QueryForm
from .transport.client import QueryServiceClient

__all__ = [
    "ClientConfig",
    "Error",
    "FormatError",
    "HttpStatusError",
    "Idle",
    "Loading",
    "QueryClientError",
    "QueryForm",
    "QueryServiceClient",
    "RequestLifecycle",
    "RequestState",
    "Success",
    "TransportError",
    "classify_payload",
    "normalize",
]
