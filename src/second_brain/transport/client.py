"""HTTP client for the answering service query endpoint."""

from __future__ import annotations

import json
import logging
from http.client import HTTPException
from typing import Any, Protocol
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from langsmith.run_helpers import traceable

from ..core.config import ClientConfig
from ..core.errors import FormatError, HttpStatusError, TransportError
from .schemas import QueryRequest

logger = logging.getLogger(__name__)


class QueryTransport(Protocol):
    def post_query(self, query: str) -> Any:
        """Send *query* and return the decoded JSON body."""


class QueryServiceClient:
    """Posts queries to ``{api_base_url}{query_path}`` and decodes the JSON reply."""

    def __init__(self, config: ClientConfig):
        self.config = config

    @property
    def endpoint(self) -> str:
        return self.config.query_endpoint

    @traceable(name="client.post_query", run_type="tool")
    def post_query(self, query: str) -> Any:
        data = QueryRequest(query=query).model_dump_json().encode("utf-8")

        try:
            req = Request(
                url=self.endpoint,
                data=data,
                headers={"Content-Type": "application/json"},
                method="POST",
            )
            with urlopen(req, timeout=self.config.request_timeout_seconds) as resp:
                status = getattr(resp, "status", 200)
                if not 200 <= status < 300:
                    raise HttpStatusError(status)
                raw = resp.read().decode("utf-8", errors="replace")
        except HTTPError as exc:
            raise HttpStatusError(exc.code) from exc
        except URLError as exc:
            reason = exc.reason if getattr(exc, "reason", None) else exc
            raise TransportError(f"Failed to reach answering service: {reason}") from exc
        except (OSError, HTTPException, ValueError) as exc:
            # ValueError covers malformed endpoints such as an unset base URL.
            raise TransportError(f"Failed to reach answering service: {exc}") from exc

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise FormatError() from exc

        logger.debug("API response: %r", payload)
        return payload
