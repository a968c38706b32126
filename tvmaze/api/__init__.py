"""TVmaze API client, request dispatcher and request options."""

from tvmaze.api.exceptions import TvmazeError, InvalidArgumentError
from tvmaze.api.options import (
    Array,
    DEFAULT_OPTIONS,
    RequestOptions,
    Scalar,
    as_query_value,
    merge_options,
)
from tvmaze.api.query import encode_query, query_pairs
from tvmaze.api.dispatcher import build_url, send_request
from tvmaze.api.client import Endpoint, TvmazeClient, TvmazeUrlBuilder, Tvmaze

__all__ = [
    "TvmazeError",
    "InvalidArgumentError",
    "Array",
    "DEFAULT_OPTIONS",
    "RequestOptions",
    "Scalar",
    "as_query_value",
    "merge_options",
    "encode_query",
    "query_pairs",
    "build_url",
    "send_request",
    "Endpoint",
    "TvmazeClient",
    "TvmazeUrlBuilder",
    "Tvmaze",
]
