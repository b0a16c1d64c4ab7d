"""Response envelope normalization.

Re-exports here provide a shorter import path; __all__ documents the public API.
"""

from .service import classify_payload, is_present, normalize, render_shape
from .shapes import BareText, DirectAnswer, NestedAnswer, ResponseShape, ResponseText

__all__ = [
    "BareText",
    "DirectAnswer",
    "NestedAnswer",
    "ResponseShape",
    "ResponseText",
    "classify_payload",
    "is_present",
    "normalize",
    "render_shape",
]
