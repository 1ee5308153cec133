"""Read-only cursor over a non-empty sequence of candidates."""

from typing import Generic, Iterable, Optional, Tuple, TypeVar

T = TypeVar("T")


class Zipper(Generic[T]):
    """Splits a candidate sequence into the items before the selection, the
    selected item and the items after it.

    The sequence is stored once and the selection is an index into it, so
    moving is constant time. A zipper is never empty; use `from_items` to get
    `None` for an empty candidate list.
    """

    def __init__(self, items: Iterable[T]):
        """Initialize the Zipper with the first item selected.

        Args:
            items: Candidates in display order, at least one

        Raises:
            ValueError: If there are no items
        """
        self._items: Tuple[T, ...] = tuple(items)
        if not self._items:
            raise ValueError("A zipper needs at least one item")
        self._position = 0

    @classmethod
    def from_items(cls, items: Iterable[T]) -> Optional["Zipper[T]"]:
        """Build a zipper, or return None when there is nothing to select."""
        items = tuple(items)
        return cls(items) if items else None

    @property
    def position(self) -> int:
        """Index of the selected item in the full sequence."""
        return self._position

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def left(self) -> Tuple[T, ...]:
        """Items before the selection, nearest last."""
        return self._items[:self._position]

    def selected(self) -> T:
        return self._items[self._position]

    def right(self) -> Tuple[T, ...]:
        """Items after the selection, nearest first."""
        return self._items[self._position + 1:]

    def select_next(self) -> None:
        """Move the selection one step right; no-op on the last item."""
        if self._position + 1 < len(self._items):
            self._position += 1

    def select_prev(self) -> None:
        """Move the selection one step left; no-op on the first item."""
        if self._position > 0:
            self._position -= 1

    def __repr__(self) -> str:
        return f"Zipper(left={self.left()!r}, selected={self.selected()!r}, right={self.right()!r})"
