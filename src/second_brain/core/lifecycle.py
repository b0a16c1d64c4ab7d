"""Request lifecycle state machine for submitting queries to the answering service."""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Optional

from langsmith.run_helpers import traceable

from ..normalizer.service import normalize
from ..transport.client import QueryServiceClient, QueryTransport
from .config import ClientConfig
from .errors import FormatError, HttpStatusError, QueryClientError, TransportError
from .types import Error, ErrorKind, Idle, Loading, RequestState, StateListener, Success

logger = logging.getLogger(__name__)

FALLBACK_FAILURE_MESSAGE = "Failed to fetch response. Please try again."

Normalizer = Callable[..., str]


class RequestLifecycle:
    """Owns the Idle -> Loading -> Success | Error state machine.

    At most one request is in flight: ``submit`` is a no-op while the state is
    Loading. Every accepted submission ends in exactly one of Success or Error.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Optional[QueryTransport] = None,
        normalizer: Normalizer = normalize,
    ):
        self.config = config
        self.transport = transport if transport is not None else QueryServiceClient(config)
        self.normalizer = normalizer
        self._state: RequestState = Idle()
        self._listeners: list[StateListener] = []
        self._pending: deque[RequestState] = deque()
        self._notifying = False
        self.state_history: list[str] = [self._state.status]

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    @property
    def answer(self) -> str:
        return self._state.answer if isinstance(self._state, Success) else ""

    @property
    def error(self) -> str:
        return self._state.message if isinstance(self._state, Error) else ""

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @traceable(name="lifecycle.submit", run_type="chain")
    def submit(self, query_text: str) -> bool:
        query = (query_text or "").strip()
        if not query or self.is_loading:
            return False

        self._transition(Loading())
        try:
            payload = self.transport.post_query(query)
            answer = self.normalizer(payload, strict_strings=self.config.strict_answer_strings)
        except QueryClientError as exc:
            logger.warning("Query failed (%s): %s", type(exc).__name__, exc)
            self._transition(Error(message=str(exc), kind=self._error_kind(exc)))
        except Exception as exc:
            logger.exception("Query failed unexpectedly")
            self._transition(Error(message=str(exc) or FALLBACK_FAILURE_MESSAGE, kind="unexpected"))
        else:
            self._transition(Success(answer=answer))
        return True

    def _transition(self, state: RequestState) -> None:
        logger.debug("Request state %s -> %s", self._state.status, state.status)
        self._state = state
        self.state_history.append(state.status)
        self._pending.append(state)
        # Transitions made by a listener are queued behind the current one so
        # every listener sees states in order and ends on the latest.
        if self._notifying:
            return
        self._notifying = True
        try:
            while self._pending:
                current = self._pending.popleft()
                for listener in list(self._listeners):
                    try:
                        listener(current)
                    except Exception:
                        logger.exception("State listener %r failed", listener)
        finally:
            self._notifying = False

    def _error_kind(self, exc: QueryClientError) -> ErrorKind:
        if isinstance(exc, HttpStatusError):
            return "http_status"
        if isinstance(exc, FormatError):
            return "format"
        if isinstance(exc, TransportError):
            return "transport"
        return "unexpected"
