"""Navigation engine: candidate filtering, cursor, selection history."""

from .keys import FieldName, Index, Key, NodeType
from .history import History, HistoryError
from .navigator import Navigator
from .selection import SelectionContext
from .zipper import Zipper

__all__ = [
    "FieldName",
    "Index",
    "Key",
    "NodeType",
    "History",
    "HistoryError",
    "Navigator",
    "SelectionContext",
    "Zipper",
]
