"""Loading documents from the supported file formats."""

import os
from typing import Any

from .indent_tree import IndentTreeError, parse_indent_tree
from .json_loader import parse_json

FORMAT_AUTO = "auto"
FORMAT_JSON = "json"
FORMAT_INDENT = "indent"
FORMATS = (FORMAT_AUTO, FORMAT_JSON, FORMAT_INDENT)

INDENT_TREE_EXTENSIONS = (".tree", ".indent", ".txt")


class DocumentLoadError(Exception):
    """Raised when an input file cannot be turned into a document."""

    def __init__(self, path: str, cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause}")


def detect_format(path: str) -> str:
    """Guess the format of a file from its extension."""
    extension = os.path.splitext(path)[1].lower()
    if extension in INDENT_TREE_EXTENSIONS:
        return FORMAT_INDENT
    return FORMAT_JSON


def load_document(path: str, fmt: str = FORMAT_AUTO) -> Any:
    """Read and parse a document file.

    Args:
        path: Path of the input file
        fmt: "json", "indent" or "auto" to decide from the extension

    Returns:
        The document as plain JSON values

    Raises:
        DocumentLoadError: If the file cannot be read or parsed
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown document format: {fmt!r}")
    if fmt == FORMAT_AUTO:
        fmt = detect_format(path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(path, e) from e

    try:
        if fmt == FORMAT_INDENT:
            return parse_indent_tree(text)
        return parse_json(text)
    except ValueError as e:
        raise DocumentLoadError(path, e) from e


__all__ = [
    "DocumentLoadError",
    "IndentTreeError",
    "FORMATS",
    "detect_format",
    "load_document",
    "parse_indent_tree",
    "parse_json",
]
