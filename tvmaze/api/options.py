"""Request options and tagged query values.

A request is described by a :class:`RequestOptions` record. Every field
defaults to ``None`` ("not supplied"); :func:`merge_options` overlays a
caller's options on top of :data:`DEFAULT_OPTIONS` field by field.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union

from tvmaze.api.exceptions import InvalidArgumentError
from tvmaze.config.settings import DEFAULT_REQUEST_TIMEOUT_SECONDS, USER_AGENT


@dataclass(frozen=True)
class Scalar:
    """A single query value, encoded as ``key=value``."""

    value: Union[str, int, float, bool]


@dataclass(frozen=True)
class Array:
    """An ordered list of query values, encoded as repeated ``key[]=value``."""

    values: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.values, str):
            raise InvalidArgumentError("Array values must be a sequence, not a string")
        object.__setattr__(self, "values", tuple(self.values))


QueryValue = Union[Scalar, Array]


def as_query_value(value: Any) -> Optional[QueryValue]:
    """
    Tag a plain Python value as a query value.

    Lists and tuples become :class:`Array`, ``None`` stays ``None`` (the key
    is dropped at encode time) and anything else becomes :class:`Scalar`.

    Args:
        value: Raw or already tagged value.

    Returns:
        Tagged value, or None.
    """
    if value is None or isinstance(value, (Scalar, Array)):
        return value
    if isinstance(value, (list, tuple)):
        return Array(value)
    return Scalar(value)


def _freeze_query(query: Optional[Mapping[str, Any]]) -> Optional[Mapping[str, Optional[QueryValue]]]:
    if query is None:
        return None
    return MappingProxyType({key: as_query_value(value) for key, value in query.items()})


@dataclass(frozen=True)
class RequestOptions:
    """
    Per-request configuration.

    Attributes:
        https: Use https instead of http.
        header: Request headers, merged by name over the defaults.
        query: Query parameters; replaces the default query entirely.
        timeout: Transport timeout in seconds.
    """

    https: Optional[bool] = None
    header: Optional[Mapping[str, str]] = None
    query: Optional[Mapping[str, Optional[QueryValue]]] = None
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if self.https is not None and not isinstance(self.https, bool):
            raise InvalidArgumentError(f"https must be a boolean, got {self.https!r}")
        if self.header is not None:
            object.__setattr__(self, "header", MappingProxyType(dict(self.header)))
        object.__setattr__(self, "query", _freeze_query(self.query))


DEFAULT_OPTIONS = RequestOptions(
    https=False,
    header={"User-Agent": USER_AGENT},
    timeout=DEFAULT_REQUEST_TIMEOUT_SECONDS,
)


def merge_options(
    defaults: RequestOptions,
    overrides: Optional[RequestOptions] = None
) -> RequestOptions:
    """
    Overlay caller options on top of defaults.

    ``https``, ``query`` and ``timeout`` are replaced when supplied.
    Headers are merged by name, so a custom header keeps the other
    default headers (``User-Agent`` included) in place.

    Args:
        defaults: Base options.
        overrides: Caller options, or None to use the defaults verbatim.

    Returns:
        The effective options.
    """
    if overrides is None:
        return defaults

    header = dict(defaults.header or {})
    if overrides.header is not None:
        header.update(overrides.header)

    return RequestOptions(
        https=defaults.https if overrides.https is None else overrides.https,
        header=header,
        query=defaults.query if overrides.query is None else overrides.query,
        timeout=defaults.timeout if overrides.timeout is None else overrides.timeout,
    )
