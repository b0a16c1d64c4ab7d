"""Answering service transport."""

from .client import QueryServiceClient, QueryTransport
from .schemas import QueryRequest

__all__ = ["QueryRequest", "QueryServiceClient", "QueryTransport"]
