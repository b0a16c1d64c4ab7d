"""Query input form and its two submission triggers."""

from ..core.lifecycle import RequestLifecycle

CONFIRM_KEY = "Enter"


class QueryForm:
    """Holds the query text and routes the confirm action and Ctrl/Cmd+Enter to submit."""

    def __init__(self, lifecycle: RequestLifecycle, text: str = "", focused: bool = False):
        self.lifecycle = lifecycle
        self.text = text
        self.focused = focused

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    @property
    def can_submit(self) -> bool:
        return bool(self.text.strip()) and not self.lifecycle.is_loading

    @property
    def input_enabled(self) -> bool:
        return not self.lifecycle.is_loading

    def confirm(self) -> bool:
        return self.lifecycle.submit(self.text)

    def handle_key(self, key: str, *, ctrl: bool = False, meta: bool = False) -> bool:
        # The chord only applies while the query field holds focus.
        if self.focused and key == CONFIRM_KEY and (ctrl or meta):
            return self.lifecycle.submit(self.text)
        return False
