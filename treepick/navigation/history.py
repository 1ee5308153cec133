"""Breadcrumb stack of the selections made on the way down the document."""

from typing import Iterator, List, Optional

from .selection import SelectionContext


class HistoryError(Exception):
    """Raised when a context without a selection is pushed onto the history."""


class History:
    """Stack of the selection contexts between the root and the node
    currently being filtered, root first.

    Every frame carries a selection: it is the key the user drilled into.
    """

    def __init__(self):
        self._frames: List[SelectionContext] = []

    def push(self, context: SelectionContext) -> None:
        """Append a context to the top of the stack.

        Args:
            context: Context whose selected key was just descended into

        Raises:
            HistoryError: If the context has no selection; the stack is left
                unchanged
        """
        if context.selected() is None:
            raise HistoryError(
                f"Cannot record a selection for filter {context.filter!r}: nothing is selected"
            )
        self._frames.append(context)

    def pop(self) -> Optional[SelectionContext]:
        """Remove and return the most recent context, or None if empty."""
        if not self._frames:
            return None
        return self._frames.pop()

    def __len__(self) -> int:
        return len(self._frames)

    def __bool__(self) -> bool:
        return bool(self._frames)

    def __iter__(self) -> Iterator[str]:
        """Yield the selected text of each frame, root first."""
        return (frame.describe_selected_key() for frame in self._frames)

    def render(self) -> str:
        """Join the selected text of every frame with single spaces."""
        return " ".join(self)

    def __str__(self) -> str:
        return self.render()
