"""Accepted answer envelope shapes returned by the answering service."""

from dataclasses import dataclass
from typing import Any, Literal, Union


ShapeKind = Literal["direct_answer", "nested_answer", "response_text", "bare_text"]


@dataclass(frozen=True)
class DirectAnswer:
    """`{"answer": ...}`"""

    value: Any
    kind: Literal["direct_answer"] = "direct_answer"


@dataclass(frozen=True)
class NestedAnswer:
    """`{"response": {"answer": ...}}`"""

    value: Any
    kind: Literal["nested_answer"] = "nested_answer"


@dataclass(frozen=True)
class ResponseText:
    """`{"response": "..."}`"""

    text: str
    kind: Literal["response_text"] = "response_text"


@dataclass(frozen=True)
class BareText:
    """A JSON string body."""

    text: str
    kind: Literal["bare_text"] = "bare_text"


ResponseShape = Union[DirectAnswer, NestedAnswer, ResponseText, BareText]
