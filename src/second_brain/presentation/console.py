"""Plain-text renderer that redraws on every request state transition."""

import sys
from typing import Optional, TextIO

from ..core.types import Error, Idle, Loading, RequestState, Success

IDLE_TEXT = "Ready to help. Ask a question about your knowledge base."
LOADING_TEXT = "Thinking..."


def render_state(state: RequestState) -> str:
    if isinstance(state, Success):
        return f"Answer:\n{state.answer}"
    if isinstance(state, Error):
        return f"Error: {state.message}"
    if isinstance(state, Loading):
        return LOADING_TEXT
    if isinstance(state, Idle):
        return IDLE_TEXT
    raise TypeError(f"unknown request state: {state!r}")


class ConsoleRenderer:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, state: RequestState) -> None:
        print(render_state(state), file=self.stream, flush=True)
