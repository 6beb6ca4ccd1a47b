"""Safe access into untyped JSON value trees.

Nothing in this module raises on a missing or mistyped path. Lookups return
``MISSING`` when the path does not exist, and coercions return ``None`` when
the value is not of the requested kind. JSON ``null`` is a real value here
(``None``) and is kept apart from ``MISSING``, since several upstream fields
are nullable on purpose.
"""

import json
import re
from typing import Any, List, Optional, Union


class _Missing:
    """Marker for an absent path."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

_INT_TEXT = re.compile(r"[+-]?[0-9]+")


def lookup(value: Any, *path: Union[str, int]) -> Any:
    """
    Walk ``path`` into ``value``.
    String steps index objects, integer steps index arrays.
    Returns MISSING as soon as a step is absent or the container has the wrong kind.
    """
    current = value
    for step in path:
        if isinstance(step, str):
            if not isinstance(current, dict) or step not in current:
                return MISSING
            current = current[step]
        else:
            if not isinstance(current, list) or not -len(current) <= step < len(current):
                return MISSING
            current = current[step]
    return current


def as_dict(value: Any) -> Optional[dict]:
    return value if isinstance(value, dict) else None


def as_list(value: Any) -> Optional[list]:
    return value if isinstance(value, list) else None


def as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def as_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def as_int(value: Any) -> Optional[int]:
    # bool is a subclass of int
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def as_float(value: Any) -> Optional[float]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return float(value)
        except OverflowError:
            return None
    return None


def as_int_text(value: Any) -> Optional[int]:
    """Parse an integer carried as decimal text, e.g. ``"42"``."""
    text = as_str(value)
    if text is None or not _INT_TEXT.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # longer than the interpreter allows for int conversion
        return None


def as_str_list(value: Any) -> Optional[List[str]]:
    """
    Decode a field the API sends either as one string or as a list of strings.
    A lone string becomes a one-element list.
    """
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    return None


def loads_text(value: Any) -> Any:
    """Decode a JSON document embedded as text. MISSING if it is not text or not JSON."""
    text = as_str(value)
    if text is None:
        return MISSING
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return MISSING
