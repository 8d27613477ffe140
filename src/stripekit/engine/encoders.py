"""
Form/Query Parameter Encoder

Turns a parameter bag (a nested mapping assembled by a route operation) into
the ``application/x-www-form-urlencoded`` text the API expects, flattening
nesting with bracket notation:

    {"metadata": {"order_id": "abc"}, "amount": 500}
    -> "metadata[order_id]=abc&amount=500"

Rules:
    - ``None`` values are dropped: absence means "leave unchanged", while an
      empty string is sent as ``key=`` and means "clear"
    - ``bool`` -> ``true``/``false``; dates and datetimes -> Unix seconds
    - numbers are written in plain notation; ``nan`` and ``inf`` are rejected
    - ``Enum`` -> its wire value; Expandable -> its bare id
    - scalar lists -> ``key[]=v`` repeated; lists holding mappings or lists
      -> indexed ``key[0][field]=v``
    - iteration order of the bag is kept, so equal bags encode identically

Any other value type raises EncodingError before a request is built.
"""

import calendar
import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, List, Sequence, Tuple, Union
from urllib.parse import quote

from pydantic import BaseModel

from ..schemas.expandable import Expandable, ExpandableCollection
from .exceptions import EncodingError

# RFC 3986 query characters minus the ones that delimit form components
_SAFE_CHARS = "!$'()*,-./:;?@_~"

ParamScalar = Union[str, int, float, Decimal, bool, date, datetime, Enum, Expandable, None]
ParamValue = Union[ParamScalar, Mapping[str, Any], Sequence[Any], BaseModel]
ParamBag = Mapping[str, ParamValue]


def encode(params: ParamBag) -> str:
    """
    Encode a parameter bag as a form/query string.

    Args:
        params: Mapping of parameter names to values.

    Returns:
        str: ``&``-joined ``key=value`` components; empty string for an empty bag.

    Raises:
        EncodingError: If any value has an unsupported type.

    Example:
        encode({"expand": ["customer", "default_source"]})
        # 'expand[]=customer&expand[]=default_source'
    """
    return "&".join(f"{key}={value}" for key, value in _components(params))


def flatten(params: ParamBag) -> List[Tuple[str, str]]:
    """
    Flatten a parameter bag into unescaped ``(key, value)`` pairs.

    Useful for inspecting what ``encode`` will send.

    Example:
        flatten({"shipping": {"address": {"city": "Paris"}}})
        # [('shipping[address][city]', 'Paris')]
    """
    pairs = []
    for path, value in _walk(params):
        pairs.append((_join_key(path, escape=False), value))
    return pairs


def _components(params: ParamBag) -> List[Tuple[str, str]]:
    return [
        (_join_key(path, escape=True), _escape(value))
        for path, value in _walk(params)
    ]


def _walk(params: ParamBag) -> List[Tuple[List[str], str]]:
    if isinstance(params, BaseModel):
        params = params.model_dump(exclude_none=True)
    if not isinstance(params, Mapping):
        raise EncodingError("<root>", params)

    out: List[Tuple[List[str], str]] = []
    for key, value in params.items():
        _walk_value([str(key)], value, out)
    return out


def _walk_value(path: List[str], value: Any, out: List[Tuple[List[str], str]]) -> None:
    if value is None:
        return

    if isinstance(value, ExpandableCollection):
        value = value.ids
    elif isinstance(value, Expandable):
        if value.id is not None:
            out.append((path, value.id))
        return
    elif isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)

    if isinstance(value, Mapping):
        for key, inner in value.items():
            _walk_value(path + [str(key)], inner, out)
        return

    if isinstance(value, (list, tuple)):
        indexed = any(isinstance(item, (Mapping, list, tuple, BaseModel)) for item in value)
        for idx, item in enumerate(value):
            _walk_value(path + [str(idx) if indexed else ""], item, out)
        return

    out.append((path, _scalar(path, value)))


def _scalar(path: List[str], value: Any) -> str:
    # bool before int: True is an int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _scalar(path, value.value)
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise EncodingError(_join_key(path, escape=False), value)
        return format(value, "f")
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(_join_key(path, escape=False), value)
        # fixed-point, never exponent notation
        return format(Decimal(repr(value)), "f")
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return str(int(value.timestamp()))
    if isinstance(value, date):
        return str(calendar.timegm(value.timetuple()))
    raise EncodingError(_join_key(path, escape=False), value)


def _join_key(path: List[str], escape: bool) -> str:
    segments = [_escape(p) if escape else p for p in path]
    return segments[0] + "".join(f"[{s}]" for s in segments[1:])


def _escape(text: str) -> str:
    return quote(text, safe=_SAFE_CHARS)
