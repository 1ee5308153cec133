"""Fuzzy candidate filtering.

Matching is a plain subsequence test: every character of the pattern must
appear in the candidate text, in order. Candidates keep the order they have
in the document; nothing is ranked.
"""

from typing import Any, List

from .keys import FieldName, Index, Key

CASE_SMART = "smart"
CASE_IGNORE = "ignore"
CASE_RESPECT = "respect"
CASE_SENSITIVITY_MODES = (CASE_SMART, CASE_IGNORE, CASE_RESPECT)


def _ignores_case(pattern: str, case_sensitivity: str) -> bool:
    if case_sensitivity == CASE_IGNORE:
        return True
    if case_sensitivity == CASE_RESPECT:
        return False
    # Smart case: an upper-case character in the pattern makes it exact
    return pattern == pattern.lower()


def fuzzy_match(pattern: str, text: str, case_sensitivity: str = CASE_SMART) -> bool:
    """Check whether `pattern` is a subsequence of `text`.

    Args:
        pattern: Filter typed by the user
        text: Candidate text
        case_sensitivity: One of "smart", "ignore" or "respect"

    Returns:
        bool: True if every pattern character occurs in text in order
    """
    if case_sensitivity not in CASE_SENSITIVITY_MODES:
        raise ValueError(f"Unknown case sensitivity: {case_sensitivity!r}")
    if not pattern:
        return True
    if _ignores_case(pattern, case_sensitivity):
        pattern = pattern.lower()
        text = text.lower()

    remaining = iter(text)
    # `in` consumes the iterator up to the match, which keeps the order
    return all(char in remaining for char in pattern)


def filter_candidates(node: Any, pattern: str, case_sensitivity: str = CASE_SMART) -> List[Key]:
    """List the keys of the children of `node` whose text matches `pattern`.

    Every field of an object is eligible. Only string elements of an array are
    eligible; other elements never become candidates. Leaves have no children
    and produce an empty list.

    Args:
        node: Document node to filter
        pattern: Filter text, the empty string matches every eligible child
        case_sensitivity: One of "smart", "ignore" or "respect"

    Returns:
        List of keys in the node's own child order
    """
    if isinstance(node, dict):
        return [
            FieldName(name) for name in node
            if fuzzy_match(pattern, name, case_sensitivity)
        ]
    if isinstance(node, list):
        return [
            Index(position) for position, value in enumerate(node)
            if isinstance(value, str) and fuzzy_match(pattern, value, case_sensitivity)
        ]
    return []
