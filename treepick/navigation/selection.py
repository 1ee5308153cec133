"""Filtering state for one level of navigation."""

from typing import Any, Iterable, List, Optional, Tuple

from .keys import Key, NodeType, candidate_text, node_type
from .matcher import CASE_SMART, filter_candidates
from .zipper import Zipper


class SelectionContext:
    """Binds a document node, the filter typed at that node and the cursor
    over the children that match it.

    The cursor is None exactly when no child of the node matches the filter,
    which is always the case for a leaf. The node is referenced, never
    copied; the document must not change while contexts over it exist.
    """

    def __init__(self, parent: Any, case_sensitivity: str = CASE_SMART):
        """Initialize the context with an empty filter.

        Args:
            parent: Document node whose children are the candidates
            case_sensitivity: Matching mode passed on to the filter
        """
        self.parent = parent
        self.case_sensitivity = case_sensitivity
        self.filter = ""
        self.cursor: Optional[Zipper[Key]] = self._build_cursor()

    def _build_cursor(self) -> Optional[Zipper[Key]]:
        return Zipper.from_items(
            filter_candidates(self.parent, self.filter, self.case_sensitivity)
        )

    def set_filter(self, text: str) -> None:
        """Replace the filter and rebuild the cursor from scratch.

        The previous selection is not kept: if anything still matches, the
        first match in document order becomes selected.
        """
        self.filter = text
        self.cursor = self._build_cursor()

    def select_next(self) -> None:
        if self.cursor is not None:
            self.cursor.select_next()

    def select_prev(self) -> None:
        if self.cursor is not None:
            self.cursor.select_prev()

    def selected(self) -> Optional[Key]:
        """Return the selected key, or None if nothing matches."""
        if self.cursor is None:
            return None
        return self.cursor.selected()

    def choices(self) -> Optional[Tuple[Tuple[Key, ...], Key, Tuple[Key, ...]]]:
        """Return the (before, selected, after) keys, or None if nothing matches."""
        if self.cursor is None:
            return None
        return self.cursor.left(), self.cursor.selected(), self.cursor.right()

    def describe(self, key: Key) -> str:
        """Display text of one of this context's candidate keys."""
        return candidate_text(self.parent, key)

    def describe_all(self, keys: Iterable[Key]) -> List[str]:
        return [self.describe(key) for key in keys]

    def describe_selected_key(self) -> str:
        """Display text of the selected candidate, empty if there is none."""
        key = self.selected()
        if key is None:
            return ""
        return self.describe(key)

    def node_type(self) -> NodeType:
        return node_type(self.parent)

    def __repr__(self) -> str:
        return f"SelectionContext(filter={self.filter!r}, selected={self.selected()!r})"
