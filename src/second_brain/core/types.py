"""Request state variants and shared literals for the query lifecycle."""

from dataclasses import dataclass
from typing import Callable, Literal, Union


StateStatus = Literal["idle", "loading", "success", "error"]
ErrorKind = Literal["transport", "http_status", "format", "unexpected"]


@dataclass(frozen=True)
class Idle:
    status: Literal["idle"] = "idle"


@dataclass(frozen=True)
class Loading:
    status: Literal["loading"] = "loading"


@dataclass(frozen=True)
class Success:
    answer: str
    status: Literal["success"] = "success"


@dataclass(frozen=True)
class Error:
    message: str
    kind: ErrorKind
    status: Literal["error"] = "error"


RequestState = Union[Idle, Loading, Success, Error]
StateListener = Callable[[RequestState], None]
