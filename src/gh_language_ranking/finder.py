"""Recursive search for a ``language`` field in event records of unknown shape."""

from __future__ import annotations

import json
from typing import Any

LANGUAGE_KEY = "language"


def find_language(node: Any) -> str | None:
    """Return the first language label found in a parsed JSON value.

    Objects are checked for a ``language`` key holding a string before their
    values are searched depth-first in document order; arrays are searched
    element by element. A ``language`` key holding null or a non-string value
    does not match, and the search carries on into the children.
    """
    if isinstance(node, dict):
        value = node.get(LANGUAGE_KEY)
        if isinstance(value, str):
            return value
        for child in node.values():
            language = find_language(child)
            if language is not None:
                return language
    elif isinstance(node, list):
        for element in node:
            language = find_language(element)
            if language is not None:
                return language
    return None


def find_language_in_line(line: str) -> str | None:
    """Parse one JSON line and search it. Unparsable lines yield ``None``."""
    try:
        return find_language(json.loads(line))
    except (ValueError, RecursionError):
        return None
