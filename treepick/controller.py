"""Translation of editing intents into navigator operations."""

from typing import Optional

from .navigation import Navigator, NodeType


def delete_last_word(text: str) -> str:
    """Drop the last word of a filter, keeping everything up to the last space."""
    trimmed = text.rstrip()
    return trimmed[:trimmed.rfind(" ") + 1]


class InputController:
    """Applies the user's keystrokes to a navigator.

    Deleting past the start of an empty filter steps back up one level, so a
    user can keep pressing backspace to retrace their path to the root.
    """

    def __init__(self, navigator: Navigator):
        self.navigator = navigator

    def insert_text(self, text: str) -> None:
        self.navigator.set_filter(self.navigator.get_filter() + text)

    def backspace(self) -> None:
        current = self.navigator.get_filter()
        if current:
            self.navigator.set_filter(current[:-1])
        else:
            self.navigator.pop_selection()

    def delete_word(self) -> None:
        current = self.navigator.get_filter()
        if current:
            self.navigator.set_filter(delete_last_word(current))
        else:
            self.navigator.pop_selection()

    def clear_filter(self) -> None:
        self.navigator.set_filter("")

    def select_next(self) -> None:
        self.navigator.select_next()

    def select_prev(self) -> None:
        self.navigator.select_prev()

    def confirm(self) -> Optional[str]:
        """Descend into the selection.

        Returns:
            The full breadcrumb when a final value was reached, None otherwise
        """
        if self.navigator.push_selection() == NodeType.LEAF:
            return self.navigator.get_history().render()
        return None
