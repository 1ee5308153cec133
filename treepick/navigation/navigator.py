"""Navigation state machine driven by the interface.

The navigator owns the context currently being filtered and the history of
contexts above it. The root context is current while the history is empty.
"""

from typing import Any, List, Optional, Tuple

from .history import History
from .keys import NodeType, child_at
from .matcher import CASE_SMART
from .selection import SelectionContext


class Navigator:
    """Walks a read-only document one fuzzy selection at a time.

    Descending pushes the current context onto the history and starts a
    fresh, unfiltered context over the selected child. Ascending restores the
    previous context exactly as it was left, filter and cursor included.
    """

    def __init__(self, root: Any, case_sensitivity: str = CASE_SMART):
        """Initialize the Navigator at the root of a document.

        Args:
            root: Document to navigate; it is referenced, not copied
            case_sensitivity: Matching mode, "smart", "ignore" or "respect"
        """
        self.case_sensitivity = case_sensitivity
        self.history = History()
        self.current = SelectionContext(root, case_sensitivity)

    @property
    def depth(self) -> int:
        """Number of selections between the root and the current node."""
        return len(self.history)

    @property
    def current_node(self) -> Any:
        return self.current.parent

    def get_filter(self) -> str:
        return self.current.filter

    def set_filter(self, text: str) -> None:
        self.current.set_filter(text)

    def select_next(self) -> None:
        self.current.select_next()

    def select_prev(self) -> None:
        self.current.select_prev()

    def choices(self) -> Optional[Tuple[List[str], str, List[str]]]:
        """Return the display text of the candidate window.

        Returns:
            Tuple of (before, selected, after), or None when there are no
            candidates at the current node
        """
        window = self.current.choices()
        if window is None:
            return None
        before, selected, after = window
        return (
            self.current.describe_all(before),
            self.current.describe(selected),
            self.current.describe_all(after),
        )

    def push_selection(self) -> NodeType:
        """Descend into the selected child.

        Nothing happens when there is no selection.

        Returns:
            NodeType: Classification of the node that is current afterwards;
                LEAF means the breadcrumb now names a final value
        """
        key = self.current.selected()
        if key is not None:
            child = child_at(self.current.parent, key)
            self.history.push(self.current)
            self.current = SelectionContext(child, self.case_sensitivity)
        return self.current.node_type()

    def pop_selection(self) -> None:
        """Return to the previous level; no-op at the root."""
        previous = self.history.pop()
        if previous is not None:
            self.current = previous

    def get_history(self) -> History:
        return self.history

    def breadcrumb(self, include_filter: bool = False) -> str:
        """Render the path to the current node.

        Args:
            include_filter: Append the live filter as the last element

        Returns:
            str: Space separated selected texts, root first
        """
        parts = list(self.history)
        if include_filter:
            parts.append(self.get_filter())
        return " ".join(parts)
