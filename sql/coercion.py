"""
=================================
Value coercion for bound params.
=================================

Converts JSON-shaped scalar values into the values handed to the SQLite
driver as positional parameters.

Rules:
    - str   -> str
    - bool  -> bool (checked before int, bool is an int subclass)
    - int   -> int inside the signed 64-bit range, float outside it
    - float -> float
    - None  -> None (a present NULL parameter, never an omitted one)
    - list / tuple / dict -> UnsupportedValueKind

Example:
    >>> from sql.coercion import coerce_value
    >>> coerce_value(5)
    5
    >>> coerce_value(2 ** 70)
    1.1805916207174113e+21
    >>> coerce_value([1, 2])
    Traceback (most recent call last):
    ...
    sql.exceptions.UnsupportedValueKind: Unsupported value kind 'array': [1, 2]
"""

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union

from .exceptions import UnsupportedValueKind

BoundParameter = Optional[Union[str, int, float, bool]]

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _kind_of(value: Any) -> str:
    if isinstance(value, Mapping):
        return 'object'
    if isinstance(value, (list, tuple)):
        return 'array'
    return type(value).__name__


def coerce_value(value: Any) -> BoundParameter:
    """
    Coerce a single JSON scalar into a bound parameter.

    Args:
        value: A str, int, float, bool or None

    Returns:
        The driver-native parameter value

    Raises:
        UnsupportedValueKind: If value is an array, object or non-JSON type
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if INT64_MIN <= value <= INT64_MAX:
            return int(value)
        try:
            return float(value)
        except OverflowError:
            raise UnsupportedValueKind(value, 'integer out of range')
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        return value
    raise UnsupportedValueKind(value, _kind_of(value))


def coerce_values(values: Iterable[Any]) -> List[BoundParameter]:
    """Coerce values in iteration order."""
    return [coerce_value(value) for value in values]
