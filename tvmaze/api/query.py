"""Query string serialization."""

from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from tvmaze.api.options import Array, as_query_value

ARRAY_SUFFIX = "[]"


def _format_scalar(value: Any) -> str:
    # Booleans travel as 1/0, the form the API uses for flags such as specials
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def _array_key(key: str) -> str:
    return key if key.endswith(ARRAY_SUFFIX) else key + ARRAY_SUFFIX


def query_pairs(query: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flatten a query mapping into ordered ``(key, value)`` pairs.

    Keys keep the insertion order of the mapping. ``None`` values are
    dropped and arrays expand to one ``key[]`` pair per item.

    Args:
        query: Mapping of key to tagged or plain value.

    Returns:
        List of key/value string pairs.
    """
    pairs: List[Tuple[str, str]] = []
    if not query:
        return pairs

    for key, raw in query.items():
        value = as_query_value(raw)
        if value is None:
            continue
        if isinstance(value, Array):
            pairs.extend((_array_key(key), _format_scalar(item)) for item in value.values)
        else:
            pairs.append((key, _format_scalar(value.value)))
    return pairs


def encode_query(query: Optional[Mapping[str, Any]]) -> str:
    """
    Encode a query mapping as a URL query string (without the leading ``?``).

    Spaces become ``+`` and reserved characters are percent-encoded, so
    ``{"q": "star vs", "embed": Array(["episodes"])}`` encodes to
    ``q=star+vs&embed%5B%5D=episodes``.
    """
    return urlencode(query_pairs(query))
