"""JSON documents."""

import json
from typing import Any


def parse_json(text: str) -> Any:
    """Parse JSON text into a document.

    Objects become dicts, whose insertion order is the order of the fields in
    the file.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON
    """
    return json.loads(text)
