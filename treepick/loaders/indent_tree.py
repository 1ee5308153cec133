"""Indentation based tree files.

A tree file lists one name per line, children indented two spaces deeper
than their parent::

    systemctl
      --user
        restart
          pulseaudio
      --system
        restart
          iwd

Sibling names without children become an array of strings; anything else
becomes an object, with childless names mapped to None.
"""

from typing import Any, List, Optional, Tuple

INDENT = "  "


class IndentTreeError(ValueError):
    """Raised when a tree file is malformed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class _TreeNode:
    def __init__(self, name: str, line_number: int):
        self.name = name
        self.line_number = line_number
        self.children: List["_TreeNode"] = []


def _split_line(line: str, line_number: int) -> Tuple[int, str]:
    """Return the depth and name of a non-blank line."""
    name = line.lstrip(" \t")
    leading = line[:len(line) - len(name)]
    if "\t" in leading:
        raise IndentTreeError("tabs are not allowed in indentation", line_number)
    if len(leading) % len(INDENT):
        raise IndentTreeError(
            f"indentation must be a multiple of {len(INDENT)} spaces", line_number
        )
    return len(leading) // len(INDENT), name.rstrip()


def _parse_nodes(text: str) -> List[_TreeNode]:
    roots: List[_TreeNode] = []
    # Open ancestors of the next line, one per depth
    stack: List[_TreeNode] = []

    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        depth, name = _split_line(line, line_number)
        if depth > len(stack):
            if not stack:
                raise IndentTreeError("the first entry must not be indented", line_number)
            raise IndentTreeError("indented more than one level below its parent", line_number)

        node = _TreeNode(name, line_number)
        del stack[depth:]
        if stack:
            stack[-1].children.append(node)
        else:
            roots.append(node)
        stack.append(node)

    return roots


def _to_document(nodes: List[_TreeNode]) -> Any:
    if all(not node.children for node in nodes):
        return [node.name for node in nodes]

    document = {}
    for node in nodes:
        if node.name in document:
            raise IndentTreeError(f"duplicate entry {node.name!r}", node.line_number)
        document[node.name] = _to_document(node.children) if node.children else None
    return document


def parse_indent_tree(text: str) -> Any:
    """Parse a tree file into a document.

    Args:
        text: Content of the tree file

    Returns:
        A list of names or a dict of name to subtree

    Raises:
        IndentTreeError: If the indentation or the names are invalid
    """
    return _to_document(_parse_nodes(text))
