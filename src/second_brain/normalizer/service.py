"""Resolve a loosely-typed service payload into a single display string.

The answering service has shipped several response envelopes over time. The
cascade below accepts all of them, first match wins:

1. ``{"answer": <present>}``
2. ``{"response": {"answer": <present>}}``
3. ``{"response": "<non-empty text>"}``
4. ``"<non-empty text>"``

Anything else is a :class:`FormatError`. A value is *present* unless it is
missing, ``null``, ``false``, ``0`` or ``""``; empty lists and objects are
present.

Non-string answers are accepted and rendered as compact JSON text unless
``strict_strings`` is set, in which case they are a :class:`FormatError`.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from typing import Any

from ..core.errors import FormatError
from .shapes import BareText, DirectAnswer, NestedAnswer, ResponseShape, ResponseText


def is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0 and not (isinstance(value, float) and math.isnan(value))
    return True


def classify_payload(payload: Any) -> ResponseShape:
    if isinstance(payload, Mapping):
        answer = payload.get("answer")
        if is_present(answer):
            return DirectAnswer(value=answer)

        response = payload.get("response")
        if isinstance(response, Mapping) and is_present(response.get("answer")):
            return NestedAnswer(value=response["answer"])
        if isinstance(response, str) and response:
            return ResponseText(text=response)

    if isinstance(payload, str) and payload:
        return BareText(text=payload)

    raise FormatError()


def render_shape(shape: ResponseShape, *, strict_strings: bool = False) -> str:
    if isinstance(shape, (ResponseText, BareText)):
        return shape.text

    value = shape.value
    if isinstance(value, str):
        return value
    if strict_strings:
        raise FormatError()
    return json.dumps(value, ensure_ascii=False)


def normalize(payload: Any, *, strict_strings: bool = False) -> str:
    return render_shape(classify_payload(payload), strict_strings=strict_strings)
