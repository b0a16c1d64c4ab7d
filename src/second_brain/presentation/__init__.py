"""Thin presentation layer that reads request state and forwards submissions."""

from .console import ConsoleRenderer, render_state
from .form import QueryForm

__all__ = ["ConsoleRenderer", "QueryForm", "render_state"]
