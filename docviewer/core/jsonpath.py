"""Evaluation of dotted/bracket paths against decoded JSON documents.

The grammar is deliberately small::

    path    := segment ("." segment)*
    segment := key | key "[" digits "]" rest

``rest`` must be empty; chained brackets such as ``a[0][1]`` are
rejected. Missing object keys evaluate to ``None`` instead of failing,
and property lookups past a missing key stay ``None``. A ``null`` stored
in the document is not an object and cannot be looked into.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from loguru import logger

from .errors import BadRequestError

_DIGITS = "0123456789"
# longer digit runs cannot address any list element
_MAX_INDEX_DIGITS = len(str(sys.maxsize))

# value of a key that is absent from its object
_MISSING = object()


class JsonKind(Enum):
    """The six kinds of decoded JSON values."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"


def json_kind(value: Any) -> JsonKind:
    """Tag a decoded JSON value with its kind.

    Raises:
        TypeError: If ``value`` is not something ``json.loads`` produces
    """
    if value is None:
        return JsonKind.NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Not a JSON value: {type(value).__name__}")


@dataclass(frozen=True)
class Segment:
    """One dot-separated piece of a path."""

    key: str
    index: Optional[int] = None
    rest: str = ""

    @property
    def is_indexed(self) -> bool:
        return self.index is not None


def _scan_index(segment: str, start: int) -> Tuple[Optional[int], int]:
    """Read ``digits "]"`` starting right after an opening bracket.

    Returns the index and the position after ``]``, or ``(None, start)``
    when the bracket does not hold a non-negative integer.
    """
    pos = start
    while pos < len(segment) and segment[pos] in _DIGITS:
        pos += 1
    if pos == start or pos >= len(segment) or segment[pos] != "]":
        return None, start
    if pos - start > _MAX_INDEX_DIGITS:
        return sys.maxsize, pos + 1
    return int(segment[start:pos]), pos + 1


def parse_segment(segment: str) -> Segment:
    """Split a segment into key, optional index and trailing remainder.

    Key characters accumulate until the first ``[`` that opens a valid
    index. A ``[`` that does not is kept as part of the key.
    """
    key = []
    pos = 0
    while pos < len(segment):
        char = segment[pos]
        if char == "[":
            index, end = _scan_index(segment, pos + 1)
            if index is not None:
                return Segment("".join(key), index, segment[end:])
        key.append(char)
        pos += 1
    return Segment(segment)


def _kind(value: Any) -> JsonKind:
    return JsonKind.NULL if value is _MISSING else json_kind(value)


def _lookup(value: Any, key: str) -> Any:
    if value is _MISSING:
        return _MISSING
    kind = json_kind(value)
    if kind is not JsonKind.OBJECT:
        logger.error(
            f"Cannot access property '{key}' - not an object, kind is {kind.value}"
        )
        raise BadRequestError(f"Cannot access property '{key}' - not an object")
    return value.get(key, _MISSING)


def _index(value: Any, index: int) -> Any:
    kind = _kind(value)
    if kind is not JsonKind.ARRAY:
        logger.error(f"Cannot index - not an array, kind is {kind.value}")
        raise BadRequestError("Cannot index - not an array")
    if not 0 <= index < len(value):
        logger.error(f"Array index out of bounds: {index} (array length: {len(value)})")
        raise BadRequestError(f"Array index out of bounds: {index}")
    return value[index]


def evaluate(document: Any, path: str) -> Any:
    """Narrow ``document`` by ``path``.

    Args:
        document: Decoded JSON value
        path: Dotted path, e.g. ``"a.b[1]"``

    Returns:
        The selected value; ``None`` when an object key is missing

    Raises:
        BadRequestError: On property access of a non-object, indexing a
            non-array, an out-of-range index or chained brackets
    """
    result = document
    for raw in path.split("."):
        segment = parse_segment(raw)

        if not segment.is_indexed:
            result = _lookup(result, segment.key)
            continue

        logger.debug(
            f"Processing array access: key={segment.key}, index={segment.index}, rest={segment.rest}"
        )
        if segment.key:
            result = _lookup(result, segment.key)
        result = _index(result, segment.index)

        if segment.rest:
            logger.error(f"Complex array paths not supported: {segment.rest}")
            raise BadRequestError("Complex array paths not supported")

    return None if result is _MISSING else result
