"""
Tvmaze - Client for the TVmaze public REST API.

Builds request URLs for the documented endpoints (search, lookup,
schedule, shows, episodes, people, updates), issues a single GET per
call and returns the decoded JSON body unchanged.
"""

__version__ = "0.1.0"

from loguru import logger

from tvmaze.api import (
    Array,
    DEFAULT_OPTIONS,
    Endpoint,
    InvalidArgumentError,
    RequestOptions,
    Scalar,
    Tvmaze,
    TvmazeClient,
    TvmazeError,
    TvmazeUrlBuilder,
    build_url,
    encode_query,
    merge_options,
    send_request,
)

# Library logging stays silent until an application enables it
logger.disable("tvmaze")

__all__ = [
    "__version__",
    "Array",
    "DEFAULT_OPTIONS",
    "Endpoint",
    "InvalidArgumentError",
    "RequestOptions",
    "Scalar",
    "Tvmaze",
    "TvmazeClient",
    "TvmazeError",
    "TvmazeUrlBuilder",
    "build_url",
    "encode_query",
    "merge_options",
    "send_request",
]
