"""Keys identifying the children of a document branch.

A document is made of plain JSON values: dicts are objects, lists are arrays
and everything else is a scalar leaf.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union


@dataclass(frozen=True)
class FieldName:
    """Name of a field inside an object."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Index:
    """Position of an element inside an array."""
    position: int

    def __str__(self) -> str:
        return str(self.position)


Key = Union[FieldName, Index]


class NodeType(Enum):
    """Classification of a document node."""
    # Object or array, more navigation is possible
    BRANCH = "branch"
    # Scalar value, navigation ends here
    LEAF = "leaf"


def is_branch(node: Any) -> bool:
    """Check whether a node is an object or an array."""
    return isinstance(node, (dict, list))


def node_type(node: Any) -> NodeType:
    """Classify a node as a branch or a leaf."""
    return NodeType.BRANCH if is_branch(node) else NodeType.LEAF


def child_at(parent: Any, key: Key) -> Any:
    """Resolve the child of `parent` identified by `key`.

    Args:
        parent: Object or array node the key was drawn from
        key: Field name or index of the child

    Returns:
        The child node
    """
    if isinstance(key, FieldName):
        return parent[key.name]
    return parent[key.position]


def candidate_text(parent: Any, key: Key) -> str:
    """Text used to match and display the child at `key`.

    Field names stand for themselves. Array elements are shown by their
    string value; any other element type has no text.
    """
    if isinstance(key, FieldName):
        return key.name
    value = parent[key.position]
    return value if isinstance(value, str) else ""
